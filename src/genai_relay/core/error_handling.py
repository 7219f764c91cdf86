import traceback
import uuid

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from genai_relay.core import logging


class RelayError(Exception):
    """Base class for errors that map straight onto an HTTP response"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    include_code: bool = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_content(self) -> dict:
        content = {"error": self.message}
        if self.include_code:
            content = {"code": self.status_code, **content}
        return content


class ClientInputError(RelayError):
    """A required prompt or attachment was not supplied"""

    status_code = status.HTTP_400_BAD_REQUEST
    include_code = True


class ProviderError(RelayError):
    """The generative model call failed; the cause is only logged"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def _sanitize_request_data(request: Request) -> dict:
    return {
        'method': request.method,
        'path': request.url.path
    }


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    context = _sanitize_request_data(request)

    if exc.status_code < 500:
        logging.warning(
            f"Rejected {context['method']} {context['path']}: {exc.message}",
            extra=context
        )

    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def handle_exception(request: Request, exc: Exception) -> JSONResponse:
    error_id = str(uuid.uuid4())
    context = _sanitize_request_data(request)

    logging.error(
        f"Error {error_id}: {str(exc)}",
        extra={
            'error_id': error_id,
            **context,
            'error_type': exc.__class__.__name__,
            'traceback': ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        }
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            'error': "An unexpected error occurred",
            'error_id': error_id
        }
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error_id = str(uuid.uuid4())
    context = _sanitize_request_data(request)

    sanitized_errors = [{
        'loc': list(err['loc']),
        'msg': err['msg']
    } for err in exc.errors()]

    logging.error(
        f"Validation error {error_id}",
        extra={
            'error_id': error_id,
            **context,
            'validation_errors': sanitized_errors
        }
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            'code': status.HTTP_400_BAD_REQUEST,
            'error': 'Invalid request data',
            'details': sanitized_errors
        }
    )

