import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import NavigationError

logger = logging.getLogger(__name__)


async def navigation_error_handler(_request: Request, exc: NavigationError) -> JSONResponse:
    logger.warning("Navigation error: %s", exc.message)
    return JSONResponse(
        status_code=409,
        content={"detail": exc.message},
    )
