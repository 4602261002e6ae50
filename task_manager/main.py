"""FastAPI application factory."""

from fastapi import FastAPI

from task_manager.config import Settings, settings as default_settings
from task_manager.exceptions import register_exception_handlers
from task_manager.middleware import AccessLogMiddleware, CORSHeadersMiddleware
from task_manager.routes import health, tasks
from task_manager.store import TaskStore


def create_app(
    settings: Settings | None = None,
    store: TaskStore | None = None,
) -> FastAPI:
    """Build an application with its own task store.

    Tests pass their own ``store`` to inspect state directly; the server
    entry point lets the factory create a fresh one.
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="An in-memory task tracking service.",
        version=settings.VERSION,
    )
    app.state.store = store if store is not None else TaskStore()

    register_exception_handlers(app)

    # Added last runs first: the access log wraps the CORS layer so
    # preflight requests are logged too.
    app.add_middleware(CORSHeadersMiddleware)
    app.add_middleware(AccessLogMiddleware)

    app.include_router(health.router)
    app.include_router(tasks.router)
    return app
