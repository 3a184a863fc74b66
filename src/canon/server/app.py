"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

import uvicorn
from fastapi import FastAPI

from canon.config import ServerConfig, load_manifest
from canon.registry import Registry
from canon.server.context import ServerContext
from canon.server.routes import index_router

logger = logging.getLogger(__name__)


def create_production_context(config: ServerConfig) -> ServerContext:
    """Load every registry declared in the configured manifest.

    Raises:
        ConfigError: If the manifest is missing or malformed
        SourceError: If any registry fails to load
    """
    registries = {
        registry_config.name: Registry.from_config(registry_config)
        for registry_config in load_manifest(config.manifest)
    }
    logger.info("Loaded %d registries from %s", len(registries), config.manifest)
    return ServerContext(registries=registries)


def make_lifespan(
    config: ServerConfig,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build the lifespan handler that loads registries on startup.

    A registry that fails to load aborts startup rather than serving
    empty data.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.context = create_production_context(config)
        yield

    return lifespan


def create_app(
    context: ServerContext | None = None,
    config: ServerConfig | None = None,
) -> FastAPI:
    """Create FastAPI application.

    Args:
        context: Optional ServerContext for testing. If None, uses lifespan
                 to create production context.
        config: Server configuration; defaults to ServerConfig.from_env()

    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = ServerConfig.from_env()

    if context is not None:
        # Test mode: use provided context, no lifespan
        app = FastAPI(
            title="Canon",
            description="Read-only listings of declared records",
            version="0.1.0",
        )
        app.state.context = context
    else:
        # Production mode: use lifespan for DI
        app = FastAPI(
            title="Canon",
            description="Read-only listings of declared records",
            version="0.1.0",
            lifespan=make_lifespan(config),
        )

    app.include_router(index_router(config.prefix))

    return app


def run(config: ServerConfig | None = None) -> None:
    """Run the server (entry point for `canon serve`)."""
    if config is None:
        config = ServerConfig.from_env()
    if config.debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    app = create_app(config=config)
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
    )


if __name__ == "__main__":
    run()
