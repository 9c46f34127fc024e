"""Entrypoint da aplicação TempMail Relay.

Expõe a aplicação ASGI (FastAPI) com o webhook do Telegram e, quando
SMTP_ENABLED=true, sobe o servidor SMTP (aiosmtpd) que recebe os emails.

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings, get_email_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

NOT_FOUND_TEXT = "Not Found"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Inicia servidor SMTP (se habilitado)

    Shutdown:
    - Para o servidor SMTP
    """
    service_name = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service_name})
    validate_runtime_settings()

    app.state.smtp_controller = None
    email_settings = get_email_settings()
    if email_settings.smtp_enabled:
        from app.bootstrap.dependencies import create_smtp_handler
        from app.infra.mail import create_smtp_controller

        controller = create_smtp_controller(create_smtp_handler(), email_settings)
        controller.start()
        app.state.smtp_controller = controller
        logger.info(
            "smtp_server_started",
            extra={"host": email_settings.smtp_host, "port": email_settings.smtp_port},
        )

    yield

    logger.info("app_shutting_down", extra={"service": service_name})
    controller = getattr(app.state, "smtp_controller", None)
    if controller is not None:
        controller.stop()
        logger.info("smtp_server_stopped")


async def _http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> PlainTextResponse:
    """Rota ou método desconhecido → 404 "Not Found" em texto puro."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return PlainTextResponse(NOT_FOUND_TEXT, status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="TempMail Relay",
        description="Relay de emails descartáveis para o Telegram",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    fastapi_app.add_exception_handler(StarletteHTTPException, _http_exception_handler)

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_base_settings().service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting TempMail Relay in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
