from repairdesk.db import models
from repairdesk.db.schema import DEVICE, REPAIR_INVOICE, STATUS, SYMPTOM
from repairdesk.repos.base import CRUDRepository


class DeviceRepository(CRUDRepository):
    spec = DEVICE
    model = models.Device


class StatusRepository(CRUDRepository):
    spec = STATUS
    model = models.Status


class SymptomRepository(CRUDRepository):
    spec = SYMPTOM
    model = models.Symptom


class RepairInvoiceRepository(CRUDRepository):
    spec = REPAIR_INVOICE
    model = models.RepairInvoice
