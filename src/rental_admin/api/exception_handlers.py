"""
Application exception handlers.

Errors from the RentalAdminError hierarchy are rendered through the
APIResponse envelope with the status code resolved from the exception type.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.exceptions import RentalAdminError
from ..models.base import APIResponse

logger = logging.getLogger(__name__)

ResponseFormatter = Callable[[str, Optional[List[Dict[str, Any]]]], Dict[str, Any]]


def _api_response_formatter(
    message: str,
    errors: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """Format error bodies with the APIResponse model."""
    response = APIResponse.error_response(message=message, errors=errors or [])
    return response.model_dump()


class ExceptionHandlerRegistry:
    """Registry for the application's exception handlers."""

    def __init__(
        self,
        response_formatter: Optional[ResponseFormatter] = None,
        is_production: bool = True,
    ):
        """
        Initialize exception handler registry.

        Args:
            response_formatter: Function to format error responses
            is_production: Whether running in production mode
        """
        self.response_formatter = response_formatter or _api_response_formatter
        self.is_production = is_production

    def register_handlers(self, app: FastAPI) -> None:
        """Register exception handlers for the application.

        Args:
            app: FastAPI application instance
        """
        @app.exception_handler(RentalAdminError)
        async def rental_admin_error_handler(request: Request, exc: RentalAdminError):
            """Handle application exceptions."""
            status_code = exc.status_code
            if status_code >= 500:
                logger.error(f"{exc.__class__.__name__} on {request.url.path}: {exc.message}")
            else:
                logger.warning(
                    f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}"
                )
            return JSONResponse(
                status_code=status_code,
                content=self.response_formatter(message=exc.message, errors=[exc.to_dict()]),
            )

        @app.exception_handler(RequestValidationError)
        async def request_validation_error_handler(request: Request, exc: RequestValidationError):
            """Handle malformed request bodies and parameters."""
            return JSONResponse(
                status_code=422,
                content=self.response_formatter(
                    message="The request could not be validated.",
                    errors=jsonable_encoder(exc.errors()),
                ),
            )

        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle unexpected exceptions."""
            logger.error(f"Unhandled exception: {exc}", exc_info=True)

            if self.is_production:
                message = "An unexpected error occurred"
            else:
                message = str(exc)

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=self.response_formatter(message=message),
            )


def register_exception_handlers(
    app: FastAPI,
    response_formatter: Optional[ResponseFormatter] = None,
    is_production: bool = True,
) -> None:
    """
    Register exception handlers for a FastAPI application.

    Args:
        app: FastAPI application instance
        response_formatter: Custom response formatter function
        is_production: Whether running in production mode
    """
    registry = ExceptionHandlerRegistry(response_formatter, is_production)
    registry.register_handlers(app)
