"""Bloglist Backend - multi-user blogging API built on FastAPI."""
