from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
import structlog

from ...application.exceptions import StorageError
from ...domain.errors import Error, ErrorType

logger = structlog.get_logger(__name__)

STATUS_BY_TYPE = {
    ErrorType.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorType.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorType.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorType.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorType.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorType.FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def problem(error: Error) -> HTTPException:
    """Translate a failed Result's error into an HTTPException."""
    return HTTPException(
        status_code=STATUS_BY_TYPE.get(error.type, status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail={"code": error.code, "description": error.description},
    )


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error("storage_error", path=request.url.path, operation=exc.operation)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": {"code": "StorageError", "description": "Storage is unavailable"}},
        )
