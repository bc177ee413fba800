from fastapi import APIRouter

from docjson.core.logging import configure_logging

router = APIRouter(prefix="/api", tags=["Health"])

logger = configure_logging()


@router.get("/health")
async def health_check() -> dict:
    logger.debug("Health check invoked")
    return {"status": "ok"}
