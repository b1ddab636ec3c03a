"""Router factory turning an ``EntityBinding`` into the five CRUD routes.

Request decoding and path parsing happen here; repository errors are left to
the exception handlers installed by ``repairdesk.main``.
"""
from typing import Any, Dict, List, Optional, Type
from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session
from repairdesk.api.params import parse_id, parse_page
from repairdesk.core.errors import ValidationError
from repairdesk.db.session import get_db
from repairdesk.repos.registry import EntityBinding, EntityRegistry
from repairdesk.schemas.common import DeleteResult, ErrorResponse

ERROR_RESPONSES: Dict[int | str, Dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def body_decoder(model: Type[BaseModel], message: str):
    """Dependency decoding the JSON body into ``model``.

    Any decode failure is reported with the fixed ``message`` only.
    """
    async def decode(request: Request) -> BaseModel:
        try:
            return model.model_validate(await request.json())
        except ValueError:
            raise ValidationError(message)
    return decode


def request_body_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema(by_alias=True)}},
        }
    }


def build_crud_router(binding: EntityBinding, registry: EntityRegistry) -> APIRouter:
    spec = binding.spec
    out_model = binding.out_model
    decode = body_decoder(binding.create_model, f"{spec.label} binding failed")
    body_schema = request_body_schema(binding.create_model)

    def get_repo(db: Session = Depends(get_db)):
        return binding.repo(db)

    router = APIRouter(prefix=f"/{spec.path}", tags=[spec.name], responses=ERROR_RESPONSES)

    @router.get("", response_model=List[out_model], name=f"list_{spec.slug}")
    def list_entities(
        limit: Optional[str] = Query(None, description="Page size, defaults to 10"),
        offset: Optional[str] = Query(None, description="Rows to skip, defaults to 0"),
        repo=Depends(get_repo),
    ):
        lim, off = parse_page(limit, offset)
        return repo.list(limit=lim, offset=off)

    @router.post("", response_model=out_model, name=f"create_{spec.slug}", openapi_extra=body_schema)
    def create_entity(payload: BaseModel = Depends(decode), repo=Depends(get_repo)):
        return repo.create(payload.model_dump())

    @router.get("/{id}", response_model=out_model, name=f"get_{spec.slug}")
    def get_entity(id: str, repo=Depends(get_repo)):
        return repo.get(parse_id(id))

    @router.put("/{id}", response_model=out_model, name=f"update_{spec.slug}", openapi_extra=body_schema)
    def update_entity(id: str, payload: BaseModel = Depends(decode), repo=Depends(get_repo)):
        return repo.update(parse_id(id), payload.model_dump())

    @router.delete("/{id}", response_model=DeleteResult, name=f"delete_{spec.slug}")
    def delete_entity(id: str, repo=Depends(get_repo)):
        entity_id = parse_id(id)
        repo.delete(entity_id)
        return DeleteResult(result=f"ok deleted {entity_id}")

    for owner in registry.referencing(spec.name):
        _add_referencing_route(router, binding, owner, get_repo)

    return router


def _add_referencing_route(router: APIRouter, binding: EntityBinding, owner: EntityBinding, get_repo) -> None:
    spec = binding.spec

    @router.get(
        f"/{{id}}/{owner.spec.path}",
        response_model=List[owner.out_model],
        name=f"list_{spec.slug}_{owner.spec.slug}s",
    )
    def list_referencing(
        id: str,
        limit: Optional[str] = Query(None),
        offset: Optional[str] = Query(None),
        repo=Depends(get_repo),
    ):
        lim, off = parse_page(limit, offset)
        return repo.referencing(parse_id(id), owner.spec, limit=lim, offset=off)
