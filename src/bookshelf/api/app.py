"""
Main FastAPI application for the Bookshelf API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import InMemoryStore

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


def build_store(app_settings: Settings) -> InMemoryStore:
    """Build the single store the application serves for its lifetime."""
    if app_settings.seed_data:
        return InMemoryStore.seeded()
    return InMemoryStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    store: InMemoryStore = app.state.store
    logger.info(
        "Starting Bookshelf API",
        authors=len(store.authors),
        books=len(store.books),
        legacy_add_author=app.state.settings.legacy_add_author,
    )
    if app.state.settings.legacy_add_author:
        logger.warning("legacy_add_author is on: addAuthor appends to the book sequence")

    yield

    # All data is dropped with the process
    logger.info("Shutting down Bookshelf API", authors=len(store.authors), books=len(store.books))


def create_app(
    app_settings: Settings | None = None, store: InMemoryStore | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use instead of the module-level instance
        store: Store to serve instead of a freshly built one
    """
    app_settings = app_settings or settings
    store = store if store is not None else build_store(app_settings)

    app = FastAPI(
        title="Bookshelf API",
        description="Authors and books served over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.store = store

    app.add_middleware(LoggingContextMiddleware)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials="*" not in app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # GraphQL endpoint
    from ..graphql.schema import create_graphql_router, validate_schema

    logger.info("Validating GraphQL schema...")
    validate_schema()

    graphql_router = create_graphql_router(
        store,
        graphiql=app_settings.graphiql,
        legacy_add_author=app_settings.legacy_add_author,
    )
    app.include_router(graphql_router, prefix="")
    logger.info("GraphQL endpoint initialized", endpoint="/graphql")

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
