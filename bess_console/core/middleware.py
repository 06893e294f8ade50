"""
Middleware de tratamento de exceções.

Converte exceções em respostas HTTP padronizadas.
"""

import traceback
import uuid

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bess_console.core.config import settings
from bess_console.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleError,
    ConsoleException,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
    ValidationError,
)

logger = structlog.get_logger()


def create_error_response(
    status_code: int,
    code: str,
    message: str,
    details: dict | None = None,
    errors: list[dict] | None = None,
) -> JSONResponse:
    """Cria resposta de erro padronizada."""
    content = {
        "success": False,
        "error": {
            "code": code,
            "message": message,
        },
    }
    # Erros por campo alimentam as mensagens inline do formulário
    if errors:
        content["error"]["errors"] = errors
    if details and settings.DEBUG:
        content["error"]["details"] = details

    return JSONResponse(status_code=status_code, content=content)


async def console_exception_handler(request: Request, exc: ConsoleException) -> JSONResponse:
    """Handler para exceções do console."""
    logger.warning(
        "Console exception",
        code=exc.code,
        message=exc.message,
        path=request.url.path,
        details=exc.details,
    )

    # Mapeia exceções para status HTTP
    status_map = {
        AuthenticationError: status.HTTP_401_UNAUTHORIZED,
        AuthorizationError: status.HTTP_403_FORBIDDEN,
        ResourceNotFoundError: status.HTTP_404_NOT_FOUND,
        ResourceAlreadyExistsError: status.HTTP_409_CONFLICT,
        ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
        BusinessRuleError: status.HTTP_400_BAD_REQUEST,
    }

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for exc_type, http_status in status_map.items():
        if isinstance(exc, exc_type):
            status_code = http_status
            break

    return create_error_response(
        status_code=status_code,
        code=exc.code,
        message=exc.message,
        details=exc.details,
        errors=exc.errors if isinstance(exc, ValidationError) else None,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Erros de validação do corpo/query no mesmo formato dos formulários."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    logger.info("Requisição inválida", path=request.url.path, errors=len(errors))

    return create_error_response(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        code="VALIDATION_ERROR",
        message="Dados inválidos",
        errors=errors,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler para exceções não tratadas."""
    logger.error(
        "Unhandled exception",
        exc_type=type(exc).__name__,
        message=str(exc),
        path=request.url.path,
        traceback=traceback.format_exc() if settings.DEBUG else None,
    )

    message = "Erro interno do servidor"
    details = None

    if settings.DEBUG:
        message = str(exc)
        details = {"traceback": traceback.format_exc()}

    return create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code="INTERNAL_ERROR",
        message=message,
        details=details,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Registra handlers de exceção na aplicação."""
    app.add_exception_handler(ConsoleException, console_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, generic_exception_handler)


class RequestContextMiddleware:
    """
    Middleware para adicionar contexto às requisições.

    Adiciona request_id ao contexto de log e ao header da resposta.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid.uuid4())[:8]

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=scope.get("path", ""),
            method=scope.get("method", ""),
        )

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((b"x-request-id", request_id.encode()))
                message["headers"] = headers
            await send(message)

        await self.app(scope, receive, send_wrapper)
