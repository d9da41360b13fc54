from fastapi import APIRouter
import subprocess

from app.schemas.common import HealthResponse

router = APIRouter()


def get_git_sha() -> str:
    """Get git SHA, fallback to 'unknown' if not in git repo."""
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "HEAD"], stderr=subprocess.DEVNULL
            )
            .decode()
            .strip()[:7]
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return "unknown"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok",
        name="article-relay-service",
        version="0.1.0",
        git_sha=get_git_sha(),
    )
