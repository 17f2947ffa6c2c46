# bloglist/routes/testing.py

"""Routes mounted only for end-to-end test environments."""

from fastapi import APIRouter
from starlette.responses import Response
from starlette.status import HTTP_204_NO_CONTENT

from bloglist.dependencies import BlogServiceDep

router = APIRouter(prefix="/api/testing", tags=["🧪 Testing"])


@router.post(
    "/reset",
    status_code=HTTP_204_NO_CONTENT,
    summary="Reset the database",
    description="Delete every blog and user.",
    operation_id="testing_reset",
)
async def reset(service: BlogServiceDep) -> Response:
    """Delete every blog and user."""
    await service.reset()
    return Response(status_code=HTTP_204_NO_CONTENT)
