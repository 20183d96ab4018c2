"""FastAPI application exposing the AI generation surface.

Routes (all under ``/api/ai`` except health) authenticate through the
``X-User-Id`` header, resolve the caller's configuration on every request and
delegate to :class:`GenerationDispatcher`, :class:`ConnectionProbe` or
:class:`ConfigService`. Errors are rendered by ``app_parts.errors``.

``create_app`` builds an isolated instance (tests inject a registry backed by
``httpx.MockTransport`` and a temporary database); the module-level ``app`` is
what ``dev_server`` serves.
"""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ..base.registry import ProviderRegistry, build_default_registry
from ..config.defaults import SERVICE_CORS_DEFAULT_ORIGINS
from ..config.env import ServerSettings, load_server_settings
from ..persistence.interfaces.repos import IUnitOfWork
from .app_parts.app_core import (
    AnswerBody,
    ConnectionTestBody,
    CoverLetterBody,
    GenerateBody,
    ResumeOptimizeBody,
    SmartAnswerBody,
    UpdateConfigBody,
    get_config_service,
    get_dispatcher,
    get_probe,
    get_uow_dep,
    get_user_id,
)
from .app_parts.disconnect import cancel_on_disconnect
from .app_parts.errors import install_exception_handlers
from .config_service import ConfigService
from .dispatcher import GenerationDispatcher
from .probe import ConnectionProbe

CORS_ORIGINS_ENV = "JOBHUNTER_CORS_ORIGINS"

router = APIRouter(prefix="/api/ai")


# ---------------------------------------------------------------------------
# Generation endpoints
# ---------------------------------------------------------------------------


@router.post("/generate")
async def post_generate(
    body: GenerateBody,
    request: Request,
    user_id: str = Depends(get_user_id),
    dispatcher: GenerationDispatcher = Depends(get_dispatcher),
) -> Dict[str, Any]:
    """Run a raw prompt against the caller's active provider."""
    async with cancel_on_disconnect(request) as cancel:
        result = await dispatcher.generate(user_id, body.to_request(), cancel=cancel)
    return result.to_dict()


@router.post("/cover-letter")
async def post_cover_letter(
    body: CoverLetterBody,
    request: Request,
    user_id: str = Depends(get_user_id),
    dispatcher: GenerationDispatcher = Depends(get_dispatcher),
) -> Dict[str, Any]:
    async with cancel_on_disconnect(request) as cancel:
        result = await dispatcher.generate_cover_letter(user_id, body.job_description, cancel=cancel)
    return result.to_dict()


@router.post("/answer")
async def post_answer(
    body: AnswerBody,
    request: Request,
    user_id: str = Depends(get_user_id),
    dispatcher: GenerationDispatcher = Depends(get_dispatcher),
) -> Dict[str, Any]:
    async with cancel_on_disconnect(request) as cancel:
        result = await dispatcher.generate_answer(user_id, body.question, body.context, cancel=cancel)
    return result.to_dict()


@router.post("/smart-answer")
async def post_smart_answer(
    body: SmartAnswerBody,
    request: Request,
    user_id: str = Depends(get_user_id),
    dispatcher: GenerationDispatcher = Depends(get_dispatcher),
) -> Dict[str, Any]:
    """Answer an application-form question using the scraped job context."""
    async with cancel_on_disconnect(request) as cancel:
        result = await dispatcher.generate_smart_answer(user_id, body.to_input(), cancel=cancel)
    return result.to_dict()


@router.post("/resume-optimize")
async def post_resume_optimize(
    body: ResumeOptimizeBody,
    request: Request,
    user_id: str = Depends(get_user_id),
    dispatcher: GenerationDispatcher = Depends(get_dispatcher),
) -> Dict[str, Any]:
    async with cancel_on_disconnect(request) as cancel:
        result = await dispatcher.generate_resume_optimization(
            user_id, body.job_description, cancel=cancel
        )
    return result.to_dict()


@router.post("/test-connection")
async def post_test_connection(
    body: ConnectionTestBody,
    request: Request,
    user_id: str = Depends(get_user_id),
    probe: ConnectionProbe = Depends(get_probe),
) -> Dict[str, Any]:
    """Probe a provider; always answers 200 with ``{success, message}``."""
    async with cancel_on_disconnect(request) as cancel:
        result = await probe.test_connection(user_id, body.provider, cancel=cancel)
    return result.to_dict()


# ---------------------------------------------------------------------------
# Configuration endpoints
# ---------------------------------------------------------------------------


@router.get("/config")
def get_config(
    user_id: str = Depends(get_user_id),
    service: ConfigService = Depends(get_config_service),
) -> Dict[str, Any]:
    """Return the caller's configuration with every secret masked."""
    return service.get_config_view(user_id)


@router.put("/config")
def put_config(
    body: UpdateConfigBody,
    user_id: str = Depends(get_user_id),
    uow: IUnitOfWork = Depends(get_uow_dep),
    service: ConfigService = Depends(get_config_service),
) -> Dict[str, Any]:
    """Upsert the supplied fields; the Unit of Work commits on success."""
    with uow:
        return service.update_config(user_id, body.changes())


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def _cors_origins() -> list:
    raw = os.getenv(CORS_ORIGINS_ENV, SERVICE_CORS_DEFAULT_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]


def create_app(
    *,
    registry: Optional[ProviderRegistry] = None,
    db_path: Optional[str] = None,
    settings_loader: Callable[[], ServerSettings] = load_server_settings,
) -> FastAPI:
    """Build the application.

    Parameters
    ----------
    registry:
        Provider registry; defaults to the four built-in adapters with
        OpenRouter attribution taken from the server settings.
    db_path:
        SQLite database path; ``None`` resolves ``JOBHUNTER_DB_PATH`` or the
        per-user default on each connection.
    settings_loader:
        Zero-argument callable returning fresh ``ServerSettings``.
    """
    if registry is None:
        settings = settings_loader()
        registry = build_default_registry(
            openrouter_referer=settings.openrouter_referer,
            openrouter_title=settings.openrouter_title,
        )
    app = FastAPI(title="JobHunter AI Service", version="0.1.0")
    app.state.registry = registry
    app.state.db_path = db_path
    app.state.settings_loader = settings_loader

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_exception_handlers(app)

    @app.get("/api/health")
    def health() -> Dict[str, Any]:
        """Liveness check."""
        return {"ok": True}

    app.include_router(router)
    return app


app = create_app()
