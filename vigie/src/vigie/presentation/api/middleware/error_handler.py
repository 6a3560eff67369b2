"""
Global error handling.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from vigie.domain.exceptions import VigieException
from vigie.infrastructure.monitoring import get_logger

logger = get_logger(__name__)

STATUS_CODE_MAP = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DEAL_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DEAL_UNAVAILABLE": status.HTTP_502_BAD_GATEWAY,
    "BLOCKCHAIN_ERROR": status.HTTP_502_BAD_GATEWAY,
    "UNSUPPORTED_CALL": status.HTTP_502_BAD_GATEWAY,
    "CHAIN_NOT_CONFIGURED": status.HTTP_503_SERVICE_UNAVAILABLE,
    "CHAIN_CONNECTION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "DATA_SOURCE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _debug_enabled(request: Request) -> bool:
    container = getattr(request.app.state, "container", None)
    return bool(container and container.settings.DEBUG)


async def vigie_exception_handler(
    request: Request, exc: VigieException
) -> JSONResponse:
    """
    Handle Vigie domain exceptions.

    Converts domain exceptions to HTTP responses. The underlying cause is
    logged in full and only echoed to the client in DEBUG mode.
    """
    status_code = STATUS_CODE_MAP.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    if status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message}",
            exc_info=exc,
        )
    else:
        logger.warning(f"{request.method} {request.url.path}: {exc.message}")

    content = {
        "success": False,
        "error": exc.code,
        "message": exc.message,
    }
    if _debug_enabled(request):
        detail = dict(exc.details)
        if exc.__cause__ is not None:
            detail["cause"] = repr(exc.__cause__)
        content["detail"] = detail

    return JSONResponse(status_code=status_code, content=content)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: log the traceback, return an opaque 500."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "INTERNAL_ERROR",
            "message": "Internal server error",
        },
    )
