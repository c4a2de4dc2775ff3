"""Translation of request validation errors into 400 responses."""
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.shared.logging import get_logger

logger = get_logger(__name__)


def format_validation_errors(errors) -> str:
    """
    Render pydantic error entries as one readable line.

    Example: "bloodType: Input should be 'A+', 'A-', ...; name: Field required"
    """
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400 with the validation message."""
    detail = format_validation_errors(exc.errors())
    logger.error(f"Rejected {request.method} {request.url.path}: {detail}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})
