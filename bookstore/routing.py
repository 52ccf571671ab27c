import os
import pkgutil
from importlib import import_module
from typing import Iterator

from fastapi import APIRouter
from fastapi.routing import APIRoute

from bookstore.logging import logger
from bookstore.settings import app_settings

# Routers served outside API_PREFIX
UNPREFIXED_MODULES = {"health"}

# Track registered modules to prevent duplicate logging
_registered_http_modules: set[str] = set()


def iter_http_routers(
    prefix: str | None = None,
) -> Iterator[tuple[str, APIRouter, str]]:
    """
    Yields every router found in ``bookstore/api/http``.

    Args:
        prefix: Path prefix for resource routers. Defaults to API_PREFIX.

    Yields:
        Tuples of (module name, router, mount prefix). The mount prefix is
        empty for the modules in UNPREFIXED_MODULES.
    """
    if prefix is None:
        prefix = app_settings.API_PREFIX

    app_dir = os.path.dirname(__file__)
    app_name = os.path.basename(app_dir)

    for _, module, _ in pkgutil.iter_modules([f"{app_dir}/api/http"]):
        api = import_module(f".{module}", package=f"{app_name}.api.http")
        mount = "" if module in UNPREFIXED_MODULES else prefix
        yield module, api.router, mount


def collect_subrouters(prefix: str | None = None) -> APIRouter:
    """
    Collects and registers all HTTP routers for the application.

    Every module in ``bookstore/api/http`` must expose a ``router``. Resource
    routers are mounted under ``prefix`` (``API_PREFIX`` by default); the
    modules in UNPREFIXED_MODULES are mounted at the root.

    Args:
        prefix: Path prefix for resource routers.

    Returns:
        The main router containing every discovered router.
    """
    main_router: APIRouter = APIRouter()

    for module, router, mount in iter_http_routers(prefix):
        main_router.include_router(router, prefix=mount)

        # Only log on first registration
        if module not in _registered_http_modules:
            logger.info(f'Register "{module}" api')
            _registered_http_modules.add(module)

    return main_router


def list_http_routes(
    prefix: str | None = None,
) -> list[tuple[str, APIRoute]]:
    """
    Lists the endpoints the application serves with their full paths.

    Built from the routers themselves, so the result does not depend on
    how the application object stores included routers.

    Returns:
        (full path, route) pairs sorted by path.
    """
    routes = [
        (f"{mount}{route.path}", route)
        for _, router, mount in iter_http_routers(prefix)
        for route in router.routes
        if isinstance(route, APIRoute)
    ]
    return sorted(routes, key=lambda item: item[0])
