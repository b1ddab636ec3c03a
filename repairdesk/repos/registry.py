from dataclasses import dataclass, field
from typing import Dict, List, Type
from pydantic import BaseModel
from repairdesk.db.schema import EntitySpec
from repairdesk.repos.base import CRUDRepository
from repairdesk.repos.entities import (
    DeviceRepository,
    RepairInvoiceRepository,
    StatusRepository,
    SymptomRepository,
)
from repairdesk.schemas.device import DeviceCreate, DeviceOut
from repairdesk.schemas.repair_invoice import RepairInvoiceCreate, RepairInvoiceOut
from repairdesk.schemas.status import StatusCreate, StatusOut
from repairdesk.schemas.symptom import SymptomCreate, SymptomOut

@dataclass(frozen=True)
class EntityBinding:
    repo: Type[CRUDRepository]
    create_model: Type[BaseModel]
    out_model: Type[BaseModel]

    @property
    def spec(self) -> EntitySpec:
        return self.repo.spec

@dataclass
class EntityRegistry:
    mapping: Dict[str, EntityBinding] = field(default_factory=dict)

    def bindings(self) -> List[EntityBinding]:
        return list(self.mapping.values())

    def referencing(self, name: str) -> List[EntityBinding]:
        """Bindings whose entity declares an edge targeting ``name``."""
        return [
            b for b in self.mapping.values()
            if any(e.target == name for e in b.spec.edges)
        ]

    @staticmethod
    def default() -> "EntityRegistry":
        return EntityRegistry(mapping={
            "Device": EntityBinding(DeviceRepository, DeviceCreate, DeviceOut),
            "Status": EntityBinding(StatusRepository, StatusCreate, StatusOut),
            "Symptom": EntityBinding(SymptomRepository, SymptomCreate, SymptomOut),
            "RepairInvoice": EntityBinding(RepairInvoiceRepository, RepairInvoiceCreate, RepairInvoiceOut),
        })
