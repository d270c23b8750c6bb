"""FastAPI application for managing channel connector configs.

Routes
------
``GET  /channel/config/``                   paginated list (``channel_config_index``)
``GET|POST /channel/config/new/{adapter}``  create form (``channel_config_new``)
``GET|PUT  /channel/config/{id}/edit``      edit form (``channel_config_edit``)
``GET|DELETE /channel/config/{id}/delete``  delete form (``channel_config_delete``)

HTML forms cannot send PUT or DELETE, so a POST carrying a ``_method`` field is
treated as that method.
"""

from __future__ import annotations

import logging
import pathlib
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, Dict, Mapping, NoReturn, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool
from starlette.middleware.sessions import SessionMiddleware

from channel.adapters.config_store import JsonConfigManager
from channel.adapters.registry import AdapterRegistry
from channel.domain.config import Config
from channel.domain.ports import AdapterPort, AdapterRegistryPort, ConfigManagerPort, UseCaseError
from channel.usecases.list_configs import ListConfigs
from channel.usecases.load_config import LoadConfig
from channel.usecases.remove_config import RemoveConfig
from channel.usecases.resolve_adapter import ResolveAdapter
from channel.usecases.save_config import SaveConfig
from channel.viewmodels.config_form_vm import ConfigFormVM

from .pagination import Paginator
from .session import FlashMessages, csrf_token
from .settings import Settings

logger = logging.getLogger(__name__)

TEMPLATES_DIR = pathlib.Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

INDEX_ROUTE = "channel_config_index"
METHOD_FIELD = "_method"
NOT_FOUND_CODES = {"ADAPTER_NOT_FOUND", "CONFIG_NOT_FOUND"}


@dataclass
class ChannelServices:
    """Collaborators shared by all config routes."""

    manager: ConfigManagerPort
    registry: AdapterRegistryPort
    paginator: Optional[Paginator]
    flash: Optional[FlashMessages]
    settings: Settings


def get_services(request: Request) -> ChannelServices:
    return request.app.state.channel


# ---------- Helpers ----------
def _raise_for(err: UseCaseError) -> NoReturn:
    if err.code in NOT_FOUND_CODES:
        raise HTTPException(404, "Not Found") from err
    raise HTTPException(500, err.message) from err


def _redirect_to_index(request: Request) -> RedirectResponse:
    return RedirectResponse(str(request.url_for(INDEX_ROUTE)), status_code=303)


async def _submitted(request: Request) -> Optional[Mapping[str, Any]]:
    if request.method in ("GET", "HEAD"):
        return None
    return await request.form()


def _effective_method(request: Request, submitted: Optional[Mapping[str, Any]]) -> str:
    if request.method == "POST" and submitted is not None:
        override = submitted.get(METHOD_FIELD)
        if isinstance(override, str) and override.strip():
            return override.strip().upper()
    return request.method


def _check_method(method: str, form: ConfigFormVM) -> None:
    if method not in ("GET", "HEAD", form.method):
        raise HTTPException(405, "Method Not Allowed")


def _token(request: Request, services: ChannelServices) -> Optional[str]:
    return csrf_token(request) if services.settings.csrf_enabled else None


def _notify(request: Request, services: ChannelServices, message: str) -> None:
    if services.flash is not None:
        services.flash.success(request, message)


def _render(request: Request, services: ChannelServices, name: str, context: Dict[str, Any]) -> Response:
    context = dict(context)
    context["flashes"] = services.flash.pop_all(request) if services.flash is not None else []
    context["title"] = services.settings.title
    return templates.TemplateResponse(request, name, context)


# ---------- Form assembly ----------
def create_new_form(request: Request, services: ChannelServices, data: Config, adapter: AdapterPort) -> ConfigFormVM:
    form = ConfigFormVM(
        "new",
        data,
        adapter=adapter,
        action=str(request.url_for("channel_config_new", adapter=adapter.get_manifest().name)),
        method="POST",
        csrf_token=_token(request, services),
        name_exists=lambda name: services.manager.find(name) is not None,
    )
    return form.add_actions(["create", "cancel"])


def create_edit_form(request: Request, services: ChannelServices, data: Config, adapter: AdapterPort) -> ConfigFormVM:
    form = ConfigFormVM(
        "edit",
        data,
        adapter=adapter,
        action=str(request.url_for("channel_config_edit", id=data.name)),
        method="PUT",
        csrf_token=_token(request, services),
    )
    return form.add_actions(["save", "cancel"])


def create_delete_form(request: Request, services: ChannelServices, data: Config) -> ConfigFormVM:
    form = ConfigFormVM(
        "delete",
        data,
        action=str(request.url_for("channel_config_delete", id=data.name)),
        method="DELETE",
        csrf_token=_token(request, services),
    )
    return form.add_actions(["delete", "cancel"])


def _save(form: ConfigFormVM, services: ChannelServices) -> bool:
    try:
        SaveConfig(services.manager)(form.data)
    except UseCaseError as e:
        logger.error("Saving config %s failed: %s", form.data.name, e.message)
        form.form_errors.append("The config could not be saved. Please try again.")
        return False
    return True


# ---------- Routes ----------
router = APIRouter(prefix="/channel/config")


@router.get("/", name=INDEX_ROUTE, response_class=HTMLResponse)
def index(request: Request, page: int = 1, services: ChannelServices = Depends(get_services)):
    """List all configs, annotated with their adapter when it is still registered."""
    if services.paginator is None:
        raise HTTPException(500, "Paginator service not found")
    rows = ListConfigs(services.manager, services.registry)()
    return _render(request, services, "config/index.html", {
        "adapters": services.registry.get_adapters(),
        "pager": services.paginator.paginate(rows, page),
    })


@router.api_route("/new/{adapter}", methods=["GET", "POST"], name="channel_config_new", response_class=HTMLResponse)
async def new(request: Request, adapter: str, services: ChannelServices = Depends(get_services)):
    submitted = await _submitted(request)
    return await run_in_threadpool(_new_config, request, adapter, services, submitted)


def _new_config(
    request: Request, adapter: str, services: ChannelServices, submitted: Optional[Mapping[str, Any]]
) -> Response:
    try:
        found = ResolveAdapter(services.registry)(adapter)
    except UseCaseError as e:
        _raise_for(e)

    data = Config(adapter=found.get_manifest().name)
    form = create_new_form(request, services, data, found)

    method = _effective_method(request, submitted)
    _check_method(method, form)
    if method == form.method:
        form.handle_submission(submitted)

        if form.clicked == "cancel":
            return _redirect_to_index(request)

        if form.is_valid() and _save(form, services):
            _notify(request, services, f"The config {data.name} is saved")
            return _redirect_to_index(request)

    return _render(request, services, "config/new.html", {"adapter": found, "data": data, "form": form})


@router.api_route("/{id}/edit", methods=["GET", "POST", "PUT"], name="channel_config_edit", response_class=HTMLResponse)
async def edit(request: Request, id: str, services: ChannelServices = Depends(get_services)):
    submitted = await _submitted(request)
    return await run_in_threadpool(_edit_config, request, id, services, submitted)


def _edit_config(
    request: Request, id: str, services: ChannelServices, submitted: Optional[Mapping[str, Any]]
) -> Response:
    try:
        data = LoadConfig(services.manager)(id)
        found = ResolveAdapter(services.registry)(data.adapter)
    except UseCaseError as e:
        _raise_for(e)

    form = create_edit_form(request, services, data, found)

    method = _effective_method(request, submitted)
    _check_method(method, form)
    if method == form.method:
        form.handle_submission(submitted)

        if form.clicked == "cancel":
            return _redirect_to_index(request)

        if form.is_valid() and _save(form, services):
            _notify(request, services, f"The changes to the config {data.name} are saved")
            return _redirect_to_index(request)

    return _render(request, services, "config/edit.html", {"adapter": found, "data": data, "form": form})


@router.api_route("/{id}/delete", methods=["GET", "POST", "DELETE"], name="channel_config_delete", response_class=HTMLResponse)
async def delete(request: Request, id: str, services: ChannelServices = Depends(get_services)):
    submitted = await _submitted(request)
    return await run_in_threadpool(_delete_config, request, id, services, submitted)


def _delete_config(
    request: Request, id: str, services: ChannelServices, submitted: Optional[Mapping[str, Any]]
) -> Response:
    data = LoadConfig(services.manager)(id, required=False)

    # A config must stay removable after its adapter was unregistered, so the
    # adapter is optional here, unlike in the new and edit actions.
    if data is None:
        return _redirect_to_index(request)

    form = create_delete_form(request, services, data)

    method = _effective_method(request, submitted)
    _check_method(method, form)
    if method == form.method:
        form.handle_submission(submitted)

        if form.clicked == "cancel":
            return _redirect_to_index(request)

        if form.is_valid():
            try:
                RemoveConfig(services.manager)(data)
            except UseCaseError as e:
                _raise_for(e)
            _notify(request, services, f"The config {data.name} is removed")
            return _redirect_to_index(request)

    adapter = ResolveAdapter(services.registry)(data.adapter, required=False)
    return _render(request, services, "config/delete.html", {"adapter": adapter, "data": data, "form": form})


# ---------- App factory ----------
def create_app(
    settings: Optional[Settings] = None,
    *,
    manager: Optional[ConfigManagerPort] = None,
    registry: Optional[AdapterRegistryPort] = None,
) -> FastAPI:
    """Wire collaborators from ``settings`` unless they are passed in."""
    settings = settings or Settings.from_env()
    services = ChannelServices(
        manager=manager if manager is not None else JsonConfigManager(settings.config_path),
        registry=registry if registry is not None else AdapterRegistry.default(),
        paginator=Paginator(settings.page_size) if settings.page_size > 0 else None,
        flash=FlashMessages() if settings.flash_enabled else None,
        settings=settings,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Channel config UI ready: %d adapter(s), store=%s",
            len(services.registry.get_adapters()),
            settings.config_path or "<memory>",
        )
        yield

    app = FastAPI(title=settings.title, version="0.1.0", lifespan=lifespan)
    app.state.channel = services

    if services.paginator is None:
        logger.warning("No page size configured; the config list is unavailable")

    app.add_middleware(SessionMiddleware, secret_key=settings.secret_key, same_site="lax")
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type"],
            allow_credentials=True,
        )

    @app.get("/health")
    def health():
        return {
            "ok": True,
            "configs": len(services.manager.find_all()),
            "adapters": [adapter.get_manifest().name for adapter in services.registry.get_adapters()],
        }

    app.include_router(router)
    return app


__all__ = [
    "ChannelServices",
    "create_app",
    "create_delete_form",
    "create_edit_form",
    "create_new_form",
    "get_services",
]
