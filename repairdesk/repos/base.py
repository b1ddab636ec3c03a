"""Generic CRUD repository driven by an ``EntitySpec``.

Every entity repository shares this one implementation. Field and edge
constraints declared in ``repairdesk.db.schema`` are checked here before the
row is flushed, and anything the store still rejects is translated into the
``repairdesk.core.errors`` taxonomy. Each repository works on the session it
was constructed with; the caller owns the session's lifetime.
"""
from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Tuple, Type
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, MultipleResultsFound, NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session
from repairdesk.core.errors import ConflictError, NotFoundError, StoreError, ValidationError
from repairdesk.db.models import MODELS
from repairdesk.db.schema import ENTITY_SPECS, EdgeSpec, EntitySpec

log = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0


class CRUDRepository:
    spec: ClassVar[EntitySpec]
    model: ClassVar[Type[Any]]

    def __init__(self, db: Session):
        self.db = db

    def _extra(self, op: str) -> dict:
        return {"entity": self.spec.slug, "op": op}

    @contextmanager
    def _guard(self, op: str):
        """Roll back and translate store exceptions raised inside the block."""
        try:
            yield
        except IntegrityError as e:
            self.db.rollback()
            log.warning("Constraint violation: %s", e.orig, extra=self._extra(op))
            raise ConflictError(f"{self.spec.label} violates a store constraint")
        except SQLAlchemyError as e:
            self.db.rollback()
            log.error("Store failure: %s", e, exc_info=True, extra=self._extra(op))
            raise StoreError(str(e))

    # reads

    def get(self, id: int):
        stmt = select(self.model).where(self.model.id == id)
        with self._guard("get"):
            try:
                return self.db.execute(stmt).scalars().one()
            except (NoResultFound, MultipleResultsFound):
                raise NotFoundError(f"{self.spec.label} not found")

    def list(self, limit: int = DEFAULT_LIMIT, offset: int = DEFAULT_OFFSET) -> List[Any]:
        stmt = select(self.model).order_by(self.model.id).limit(limit).offset(offset)
        with self._guard("list"):
            return list(self.db.execute(stmt).scalars().all())

    def referencing(self, id: int, owner: EntitySpec,
                    limit: int = DEFAULT_LIMIT, offset: int = DEFAULT_OFFSET) -> List[Any]:
        """List ``owner`` rows whose edge points at row ``id`` of this entity."""
        self.get(id)
        edge = self._edge_from(owner)
        owner_model = MODELS[owner.name]
        stmt = (
            select(owner_model)
            .where(getattr(owner_model, edge.column) == id)
            .order_by(owner_model.id)
            .limit(limit)
            .offset(offset)
        )
        with self._guard("referencing"):
            return list(self.db.execute(stmt).scalars().all())

    # writes

    def create(self, values: Dict[str, Any]):
        data = self._normalize(values)
        with self._guard("create"):
            self._check(data, current_id=None)
            row = self.model(**data)
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        log.info("Created %s %s", self.spec.label, row.id, extra=self._extra("create"))
        return row

    def update(self, id: int, values: Dict[str, Any]):
        row = self.get(id)
        data = self._normalize(values)
        with self._guard("update"):
            self._check(data, current_id=id)
            for key, value in data.items():
                setattr(row, key, value)
            self.db.commit()
            self.db.refresh(row)
        log.info("Updated %s %s", self.spec.label, id, extra=self._extra("update"))
        return row

    def delete(self, id: int) -> None:
        row = self.get(id)
        with self._guard("delete"):
            for owner, edge in self._incoming_edges():
                owner_model = MODELS[owner.name]
                stmt = (
                    select(func.count())
                    .select_from(owner_model)
                    .where(getattr(owner_model, edge.column) == id)
                )
                count = self.db.execute(stmt).scalar_one()
                if count:
                    raise ConflictError(
                        f"{self.spec.label} {id} is still referenced by {count} {owner.label}(s)"
                    )
            self.db.delete(row)
            self.db.commit()
        log.info("Deleted %s %s", self.spec.label, id, extra=self._extra("delete"))

    # helpers

    def _normalize(self, values: Dict[str, Any]) -> Dict[str, Any]:
        # full-record semantics: absent attributes are written as None
        return {name: values.get(name) for name in self.spec.writable()}

    def _check(self, data: Dict[str, Any], current_id: Optional[int]) -> None:
        for f in self.spec.fields:
            value = data.get(f.name)
            if value is None:
                if f.required:
                    raise ValidationError(f'missing required field "{f.wire_name}"')
                continue
            if f.not_empty and value == "":
                raise ValidationError(f'field "{f.wire_name}" must not be empty')
            if f.unique and self._taken(f.name, value, current_id):
                raise ConflictError(f"{self.spec.label} with {f.wire_name} {value} already exists")

        for e in self.spec.edges:
            target_id = data.get(e.column)
            if target_id is None:
                if e.required:
                    raise ValidationError(f'missing required edge "{e.wire_name}"')
                continue
            target = ENTITY_SPECS[e.target]
            if self.db.get(MODELS[e.target], target_id) is None:
                raise ValidationError(
                    f'{target.label} {target_id} referenced by "{e.wire_name}" does not exist'
                )
            if e.unique and self._taken(e.column, target_id, current_id):
                raise ConflictError(f"{target.label} {target_id} already has a {self.spec.label}")

    def _taken(self, attr: str, value: Any, current_id: Optional[int]) -> bool:
        stmt = select(self.model.id).where(getattr(self.model, attr) == value)
        if current_id is not None:
            stmt = stmt.where(self.model.id != current_id)
        return self.db.execute(stmt.limit(1)).first() is not None

    def _incoming_edges(self) -> Iterator[Tuple[EntitySpec, EdgeSpec]]:
        for owner in ENTITY_SPECS.values():
            for edge in owner.edges:
                if edge.target == self.spec.name:
                    yield owner, edge

    def _edge_from(self, owner: EntitySpec) -> EdgeSpec:
        for candidate, edge in self._incoming_edges():
            if candidate.name == owner.name:
                return edge
        raise ValueError(f"{owner.name} has no edge to {self.spec.name}")
