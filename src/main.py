import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.exceptions import HTTPException

from src.api.router import api_router, root_router
from src.config import Settings, load_settings
from src.logging_config import setup_logging
from src.middleware.access_log import AccessLogMiddleware
from src.middleware.error_handler import http_exception_handler, unhandled_exception_handler
from src.middleware.request_id import RequestIdMiddleware
from src.middleware.security_headers import SecurityHeadersMiddleware

logger = logging.getLogger(__name__)

_OPENAPI_TAGS = [
    {"name": "Health", "description": "Liveness and configuration self-check"},
    {"name": "Service", "description": "Service discovery and status"},
    {"name": "Twilio", "description": "Telephony webhooks"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    settings: Settings = app.state.settings
    logger.info(
        "%s %s starting (environment=%s, database=%s)",
        settings.app_name,
        settings.version,
        settings.node_env,
        "configured" if settings.database_url else "not configured",
    )
    yield
    logger.info("%s shutting down", settings.app_name)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around an immutable ``Settings`` instance.

    When *settings* is omitted it is loaded from the environment once, here;
    request handlers receive it through :func:`src.dependencies.get_settings`.
    """
    settings = settings if settings is not None else load_settings()

    app = FastAPI(
        title=settings.app_name,
        description="AI Survey System service API",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=_OPENAPI_TAGS,
    )
    app.state.settings = settings

    # -----------------------------------------------------------------------
    # Exception handlers
    # -----------------------------------------------------------------------

    app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # -----------------------------------------------------------------------
    # Middleware (Starlette LIFO: last add_middleware call runs outermost)
    # -----------------------------------------------------------------------

    # GZipMiddleware runs innermost so compressed bodies still receive every header.
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(SecurityHeadersMiddleware)

    # AccessLogMiddleware reads REQUEST_ID_CTX written by RequestIdMiddleware, so it
    # must run inside it (closer to the application).
    app.add_middleware(AccessLogMiddleware)

    # RequestIdMiddleware runs outermost. Registered last so it is the first layer
    # to execute on every request and the last to complete on every response.
    app.add_middleware(RequestIdMiddleware)

    app.include_router(root_router)
    app.include_router(api_router)

    return app


# Module-level app for ``uvicorn src.main:app`` and ``python -m src``; logging is
# configured before the app exists so every entry point emits JSON lines.
_settings = load_settings()
setup_logging(_settings.log_level)
app = create_app(_settings)
