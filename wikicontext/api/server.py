from fastapi import FastAPI

from wikicontext.api.routers import create_context_router, create_systems_router
from wikicontext.container import ENV, SECRET_KEYS, Container


def create_app(container: Container = None) -> FastAPI:
    """Build the FastAPI application around a DI container."""
    container = container or Container()
    app = FastAPI(title="WikiContext", version="0.1.0")
    app.state.container = container
    app.include_router(create_systems_router(ENV, SECRET_KEYS))
    app.include_router(create_context_router(container.crawl_controller))
    return app
