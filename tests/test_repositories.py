"""Tests for the generic CRUD repository and its edge rules."""
import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from repairdesk.core.errors import ConflictError, NotFoundError, StoreError, ValidationError
from repairdesk.db import models
from repairdesk.db.schema import REPAIR_INVOICE
from repairdesk.db.session import build_engine
from repairdesk.repos.entities import (
    DeviceRepository,
    RepairInvoiceRepository,
    StatusRepository,
    SymptomRepository,
)


def _count(db, model) -> int:
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def test_create_assigns_fresh_id_and_get_returns_same_row(db_session):
    """Created rows get an unused store id and read back unchanged."""
    repo = DeviceRepository(db_session)
    first = repo.create({"device_id": 1001, "customer_id": 42})
    second = repo.create({"device_id": 1002, "customer_id": 43})

    assert first.id != second.id
    fetched = repo.get(first.id)
    assert (fetched.id, fetched.device_id, fetched.customer_id) == (first.id, 1001, 42)


def test_device_fields_are_optional(db_session):
    device = DeviceRepository(db_session).create({})
    assert device.id is not None
    assert device.device_id is None
    assert device.customer_id is None


def test_get_missing_raises_not_found(db_session):
    with pytest.raises(NotFoundError) as exc:
        StatusRepository(db_session).get(999)
    assert exc.value.message == "status not found"


def test_list_respects_limit_and_offset(db_session):
    repo = SymptomRepository(db_session)
    for i in range(15):
        repo.create({"symptom_name": f"symptom {i}"})

    assert len(repo.list()) == 10
    assert len(repo.list(limit=4)) == 4
    page = repo.list(limit=10, offset=10)
    assert [s.symptom_name for s in page] == [f"symptom {i}" for i in range(10, 15)]


def test_list_empty_returns_empty_sequence(db_session):
    assert StatusRepository(db_session).list() == []


def test_delete_succeeds_once_then_not_found(db_session):
    repo = StatusRepository(db_session)
    status = repo.create({"status_name": "received"})

    repo.delete(status.id)
    with pytest.raises(NotFoundError):
        repo.delete(status.id)
    with pytest.raises(NotFoundError):
        repo.get(status.id)


def test_delete_nonexistent_raises_not_found(db_session):
    with pytest.raises(NotFoundError):
        DeviceRepository(db_session).delete(12345)


@pytest.mark.parametrize("repo_cls,field", [
    (StatusRepository, "status_name"),
    (SymptomRepository, "symptom_name"),
])
def test_empty_or_missing_name_fails_validation(db_session, repo_cls, field):
    repo = repo_cls(db_session)

    with pytest.raises(ValidationError) as exc:
        repo.create({field: ""})
    assert "must not be empty" in exc.value.message

    with pytest.raises(ValidationError) as exc:
        repo.create({})
    assert "missing required field" in exc.value.message

    assert _count(db_session, repo.model) == 0


def test_duplicate_unique_field_conflicts(db_session):
    repo = StatusRepository(db_session)
    repo.create({"status_id": 1, "status_name": "received"})

    with pytest.raises(ConflictError) as exc:
        repo.create({"status_id": 1, "status_name": "repaired"})
    assert "Status_ID 1 already exists" in exc.value.message
    assert _count(db_session, models.Status) == 1


def test_repair_invoice_without_device_is_rejected(db_session):
    repo = RepairInvoiceRepository(db_session)

    with pytest.raises(ValidationError) as exc:
        repo.create({"repair_invoice_id": 1})
    assert 'missing required edge "Device_ID"' == exc.value.message

    with pytest.raises(ValidationError):
        repo.create({"device_id": 777})

    assert _count(db_session, models.RepairInvoice) == 0


def test_repair_invoice_with_unknown_optional_edge_is_rejected(db_session):
    device = DeviceRepository(db_session).create({})
    with pytest.raises(ValidationError) as exc:
        RepairInvoiceRepository(db_session).create({"device_id": device.id, "status_id": 404})
    assert "status 404" in exc.value.message


def test_device_backs_at_most_one_invoice(db_session):
    device = DeviceRepository(db_session).create({"device_id": 1})
    repo = RepairInvoiceRepository(db_session)
    repo.create({"device_id": device.id})

    with pytest.raises(ConflictError) as exc:
        repo.create({"device_id": device.id})
    assert "already has a repair invoice" in exc.value.message
    assert _count(db_session, models.RepairInvoice) == 1


def test_invoices_may_share_status_and_symptom(db_session):
    devices = DeviceRepository(db_session)
    status = StatusRepository(db_session).create({"status_name": "in repair"})
    symptom = SymptomRepository(db_session).create({"symptom_name": "no power"})
    repo = RepairInvoiceRepository(db_session)

    a = repo.create({"device_id": devices.create({}).id, "status_id": status.id, "symptom_id": symptom.id})
    b = repo.create({"device_id": devices.create({}).id, "status_id": status.id, "symptom_id": symptom.id})

    assert a.status_id == b.status_id == status.id
    assert a.symptom_id == b.symptom_id == symptom.id


def test_update_overwrites_whole_record(db_session):
    repo = DeviceRepository(db_session)
    device = repo.create({"device_id": 5, "customer_id": 9})

    updated = repo.update(device.id, {"customer_id": 10})
    assert updated.id == device.id
    assert updated.customer_id == 10
    assert updated.device_id is None


def test_update_keeps_own_unique_value(db_session):
    repo = StatusRepository(db_session)
    status = repo.create({"status_id": 3, "status_name": "received"})

    updated = repo.update(status.id, {"status_id": 3, "status_name": "diagnosed"})
    assert updated.status_name == "diagnosed"


def test_update_conflicts_with_other_row(db_session):
    repo = SymptomRepository(db_session)
    repo.create({"symptom_id": 1, "symptom_name": "cracked screen"})
    other = repo.create({"symptom_id": 2, "symptom_name": "battery drain"})

    with pytest.raises(ConflictError):
        repo.update(other.id, {"symptom_id": 1, "symptom_name": "battery drain"})
    assert repo.get(other.id).symptom_id == 2


def test_update_missing_raises_not_found(db_session):
    with pytest.raises(NotFoundError):
        StatusRepository(db_session).update(99, {"status_name": "x"})


def test_update_validates_required_fields(db_session):
    repo = StatusRepository(db_session)
    status = repo.create({"status_name": "received"})
    with pytest.raises(ValidationError):
        repo.update(status.id, {"status_name": ""})
    assert repo.get(status.id).status_name == "received"


def test_invoice_can_move_to_another_free_device(db_session):
    devices = DeviceRepository(db_session)
    first, second = devices.create({}), devices.create({})
    repo = RepairInvoiceRepository(db_session)
    invoice = repo.create({"device_id": first.id})

    moved = repo.update(invoice.id, {"device_id": second.id})
    assert moved.device_id == second.id
    # the invoice itself does not count as a conflicting claim
    assert repo.update(invoice.id, {"device_id": second.id}).device_id == second.id


def test_delete_referenced_target_is_blocked(db_session):
    device = DeviceRepository(db_session).create({})
    status = StatusRepository(db_session).create({"status_name": "open"})
    invoice = RepairInvoiceRepository(db_session).create({"device_id": device.id, "status_id": status.id})

    with pytest.raises(ConflictError) as exc:
        DeviceRepository(db_session).delete(device.id)
    assert "still referenced" in exc.value.message
    with pytest.raises(ConflictError):
        StatusRepository(db_session).delete(status.id)

    RepairInvoiceRepository(db_session).delete(invoice.id)
    DeviceRepository(db_session).delete(device.id)
    StatusRepository(db_session).delete(status.id)
    assert _count(db_session, models.Device) == 0


def test_referencing_lists_only_linked_invoices(db_session):
    devices = DeviceRepository(db_session)
    statuses = StatusRepository(db_session)
    open_status = statuses.create({"status_name": "open"})
    closed_status = statuses.create({"status_name": "closed"})
    invoices = RepairInvoiceRepository(db_session)
    linked = [invoices.create({"device_id": devices.create({}).id, "status_id": open_status.id}) for _ in range(3)]
    invoices.create({"device_id": devices.create({}).id, "status_id": closed_status.id})

    rows = statuses.referencing(open_status.id, REPAIR_INVOICE)
    assert [r.id for r in rows] == [i.id for i in linked]
    assert len(statuses.referencing(open_status.id, REPAIR_INVOICE, limit=2)) == 2

    with pytest.raises(NotFoundError):
        statuses.referencing(999, REPAIR_INVOICE)


def test_store_failure_raises_store_error():
    """A store without the schema surfaces as StoreError, not a raw exception."""
    eng = build_engine("sqlite+pysqlite:///:memory:", poolclass=StaticPool)
    session = sessionmaker(bind=eng)()
    try:
        with pytest.raises(StoreError):
            DeviceRepository(session).list()
    finally:
        session.close()
        eng.dispose()
