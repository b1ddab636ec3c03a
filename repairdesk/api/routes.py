from fastapi import APIRouter
from repairdesk.api.crud import build_crud_router
from repairdesk.api.routes_health import router as health_router
from repairdesk.repos.registry import EntityRegistry

def build_router(registry: EntityRegistry | None = None) -> APIRouter:
    registry = registry or EntityRegistry.default()
    router = APIRouter()
    router.include_router(health_router, tags=["health"])
    for binding in registry.bindings():
        router.include_router(build_crud_router(binding, registry))
    return router

router = build_router()
