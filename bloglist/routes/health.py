# bloglist/routes/health.py

"""Liveness probe."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from bloglist.dependencies import ContextDep
from bloglist.utils.helpers import today_str

router = APIRouter(tags=["❤️ Health"])


@router.get(
    "/health",
    response_class=ORJSONResponse,
    summary="Health check",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "ok",
                        "app": "Bloglist Backend",
                        "version": "1.0.0",
                        "timestamp": "2025-01-01 12:00:00",
                    },
                },
            },
        },
    },
    operation_id="health",
)
async def health(context: ContextDep) -> dict[str, str]:
    """Report that the application is up."""
    return {
        "status": "ok",
        "app": context.settings.APP_NAME,
        "version": context.settings.APP_VERSION,
        "timestamp": today_str(),
    }
