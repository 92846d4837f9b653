"""FastAPI application factory and server entrypoint for the htmx prototype."""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI

from htmx_prototype.config import Settings, get_settings
from htmx_prototype.counter import CounterState, router as counter_router
from htmx_prototype.lib.access_log import AccessLogMiddleware
from htmx_prototype.lib.logger import configure_logging, get_logger
from htmx_prototype.templating import TemplateParseError, TemplateStore

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    templates: TemplateStore | None = None,
    counter: CounterState | None = None,
) -> FastAPI:
    """Build the application; raises TemplateParseError if templates are broken."""

    settings = settings or get_settings()
    if templates is None:
        templates = TemplateStore.from_directory(settings.templates_dir)

    app = FastAPI(title="htmx prototype", version="0.1.0", docs_url=None, redoc_url=None, openapi_url=None)
    app.add_middleware(AccessLogMiddleware)

    app.state.settings = settings
    app.state.templates = templates
    app.state.counter = counter or CounterState()

    app.include_router(counter_router, tags=["counter"])
    return app


def run(settings: Settings | None = None) -> None:
    """Serve until a shutdown signal; exit non-zero on startup or serve failure."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    try:
        app = create_app(settings)
    except TemplateParseError as exc:
        logger.critical("server failed to initialize: %s", exc, extra={"template": exc.name})
        raise SystemExit(1) from exc

    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        http="h11",
        timeout_keep_alive=settings.keep_alive_timeout_seconds,
        timeout_graceful_shutdown=settings.graceful_shutdown_timeout_seconds,
        h11_max_incomplete_event_size=settings.max_header_bytes,
        access_log=False,
        log_config=None,
    )
    server = uvicorn.Server(config)

    logger.info(settings.base_url)
    try:
        server.run()
    except KeyboardInterrupt:
        # uvicorn re-raises the captured SIGINT after shutting down cleanly.
        logger.info("server stopped")
    except (OSError, SystemExit) as exc:
        logger.critical("server terminated with error: %r", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    run()
