"""HTTP route handlers for registry listings."""

from fastapi import APIRouter, HTTPException, Request, Response
from pydantic import BaseModel

from canon.listing import render
from canon.registry import Registry
from canon.server.context import ServerContext

JSON_MEDIA_TYPE = "application/json"


class RegistrySummary(BaseModel):
    """One entry in the registry index."""

    name: str
    records: int


class RegistryIndexResponse(BaseModel):
    """Response body for the registry index."""

    registries: list[RegistrySummary]


def listing_router(registry: Registry, path: str) -> APIRouter:
    """Build a router publishing one registry read-only.

    The router has a single GET route whose entire body is the rendered
    JSON listing. Other verbs on the path answer 405.

    Args:
        registry: Registry to publish
        path: Mount path, e.g. "/errors"

    Returns:
        Router to include in any FastAPI application
    """
    router = APIRouter(tags=["registries"])

    @router.get(path, response_class=Response, name=f"listing:{registry.name}")
    def get_listing() -> Response:
        return Response(content=render(registry, "json"), media_type=JSON_MEDIA_TYPE)

    return router


def index_router(prefix: str) -> APIRouter:
    """Build the router that lists the mounted registries."""
    router = APIRouter(tags=["registries"])

    @router.get(prefix, response_model=RegistryIndexResponse)
    def list_registries(request: Request) -> RegistryIndexResponse:
        ctx = get_context(request)
        return RegistryIndexResponse(
            registries=[
                RegistrySummary(name=name, records=len(registry))
                for name, registry in ctx.registries.items()
            ]
        )

    @router.get(prefix + "/{name}", response_class=Response)
    def get_registry(request: Request, name: str) -> Response:
        ctx = get_context(request)
        if name not in ctx.registries:
            raise HTTPException(status_code=404, detail=f"Registry {name} not found")
        return Response(content=render(ctx.registries[name], "json"), media_type=JSON_MEDIA_TYPE)

    return router


def get_context(request: Request) -> ServerContext:
    """Get ServerContext from application state."""
    return request.app.state.context
