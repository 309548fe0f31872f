import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_response(status_code: int, error) -> JSONResponse:
    """Every failure leaves the API as {message, status: false, error}."""
    try:
        message = HTTPStatus(status_code).phrase
    except ValueError:
        message = "Error"
    return JSONResponse(
        status_code=status_code,
        content={"message": message, "status": False, "error": error},
    )


def format_validation_errors(errors) -> str:
    parts = []
    for err in errors:
        # Drop the leading "body"/"query"/"path" marker; keep the wire field name
        location = ".".join(str(part) for part in err.get("loc", ())[1:])
        parts.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))
    return "; ".join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, exc.detail)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    detail = format_validation_errors(exc.errors())
    logger.warning(f"Rejected {request.method} {request.url.path}: {detail}")
    return error_response(status.HTTP_400_BAD_REQUEST, detail)


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {str(exc)}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Internal server error: {str(exc)}")


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
