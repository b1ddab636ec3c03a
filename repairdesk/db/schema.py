"""Declarative field and edge definitions for the four repair entities.

Each ``EntitySpec`` states which attributes an entity carries, which of them
are required, non-empty or unique, and which foreign edges it owns. The
generic repository reads these specs to enforce constraints before touching
the store, so adding an entity means adding an ``EntitySpec`` and a model class.
"""
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class FieldSpec:
    """One scalar attribute.

    ``name`` is the Python/column attribute, ``wire_name`` the JSON key.
    """
    name: str
    wire_name: str
    required: bool = False
    not_empty: bool = False
    unique: bool = False


@dataclass(frozen=True)
class EdgeSpec:
    """A foreign-key edge stored on the owning entity.

    ``unique`` means a given target row may back at most one owning row
    through this edge.
    """
    name: str
    column: str
    wire_name: str
    target: str
    required: bool = False
    unique: bool = False


@dataclass(frozen=True)
class EntitySpec:
    name: str
    slug: str
    path: str
    fields: List[FieldSpec] = field(default_factory=list)
    edges: List[EdgeSpec] = field(default_factory=list)

    @property
    def label(self) -> str:
        """Lower-case label used in error messages, e.g. ``repair invoice``."""
        return self.slug.replace("_", " ")

    def writable(self) -> List[str]:
        return [f.name for f in self.fields] + [e.column for e in self.edges]


DEVICE = EntitySpec(
    name="Device",
    slug="device",
    path="devices",
    fields=[
        FieldSpec("device_id", "Device_ID", unique=True),
        FieldSpec("customer_id", "Customer_ID", unique=True),
    ],
)

STATUS = EntitySpec(
    name="Status",
    slug="status",
    path="statuses",
    fields=[
        FieldSpec("status_id", "Status_ID", unique=True),
        FieldSpec("status_name", "Status_name", required=True, not_empty=True),
    ],
)

SYMPTOM = EntitySpec(
    name="Symptom",
    slug="symptom",
    path="symptoms",
    fields=[
        FieldSpec("symptom_id", "Symptom_ID", unique=True),
        FieldSpec("symptom_name", "Symptom_name", required=True, not_empty=True),
    ],
)

# Status and Symptom each back many invoices; only the Device edge is one-to-one.
REPAIR_INVOICE = EntitySpec(
    name="RepairInvoice",
    slug="repair_invoice",
    path="repair-invoices",
    fields=[
        FieldSpec("repair_invoice_id", "RepairInvoice_ID", unique=True),
    ],
    edges=[
        EdgeSpec("device", "device_id", "Device_ID", target="Device", required=True, unique=True),
        EdgeSpec("status", "status_id", "Status_ID", target="Status"),
        EdgeSpec("symptom", "symptom_id", "Symptom_ID", target="Symptom"),
    ],
)

ENTITY_SPECS: Dict[str, EntitySpec] = {
    spec.name: spec for spec in (DEVICE, STATUS, SYMPTOM, REPAIR_INVOICE)
}
