"""
Logging setup for the API process.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def configure_logging(mode: str) -> None:
    global _configured
    level = logging.DEBUG if mode == "debug" else logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True


def _route_entries(routes: list, prefix: str = "") -> list[tuple[str, str, str]]:
    entries: list[tuple[str, str, str]] = []
    for route in routes:
        methods = getattr(route, "methods", None)
        path = getattr(route, "path", None)
        if not methods or path is None:
            # Included routers may show up as one nested entry; the caller
            # passes those routers explicitly.
            continue
        endpoint = getattr(route, "endpoint", None)
        name = getattr(endpoint, "__name__", getattr(route, "name", "?"))
        for method in sorted(methods):
            entries.append((method, prefix + path, name))
    return entries


def log_routes(
    app: FastAPI,
    logger: logging.Logger,
    *,
    mounted: list[tuple[str, APIRouter]] | None = None,
) -> None:
    """
    Log the route table (debug mode only).

    `mounted` lists (prefix, router) pairs included into `app`, so their
    routes are listed whether or not the app flattens them.
    """
    entries = _route_entries(app.routes)
    for prefix, router in mounted or []:
        entries.extend(_route_entries(router.routes, prefix))

    seen: set[tuple[str, str]] = set()
    for method, path, name in entries:
        if (method, path) in seen:
            continue
        seen.add((method, path))
        logger.debug("route %-6s %s -> %s", method, path, name)
