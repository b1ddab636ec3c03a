from __future__ import annotations
from typing import List, Optional
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from repairdesk.db.session import Base


class Device(Base):
    __tablename__ = "devices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    device_id: Mapped[Optional[int]] = mapped_column(Integer, unique=True, nullable=True)
    customer_id: Mapped[Optional[int]] = mapped_column(Integer, unique=True, nullable=True)

    repair_invoice: Mapped[Optional["RepairInvoice"]] = relationship(back_populates="device", uselist=False)


class Status(Base):
    __tablename__ = "statuses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    status_id: Mapped[Optional[int]] = mapped_column(Integer, unique=True, nullable=True)
    status_name: Mapped[str] = mapped_column(String(255), nullable=False)

    repair_invoices: Mapped[List["RepairInvoice"]] = relationship(back_populates="status")


class Symptom(Base):
    __tablename__ = "symptoms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    symptom_id: Mapped[Optional[int]] = mapped_column(Integer, unique=True, nullable=True)
    symptom_name: Mapped[str] = mapped_column(String(255), nullable=False)

    repair_invoices: Mapped[List["RepairInvoice"]] = relationship(back_populates="symptom")


class RepairInvoice(Base):
    __tablename__ = "repair_invoices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    repair_invoice_id: Mapped[Optional[int]] = mapped_column(Integer, unique=True, nullable=True)

    # references point at store ids, not at the domain *_id attributes
    device_id: Mapped[int] = mapped_column(ForeignKey("devices.id"), unique=True, nullable=False)
    status_id: Mapped[Optional[int]] = mapped_column(ForeignKey("statuses.id"), nullable=True, index=True)
    symptom_id: Mapped[Optional[int]] = mapped_column(ForeignKey("symptoms.id"), nullable=True, index=True)

    device: Mapped[Device] = relationship(back_populates="repair_invoice")
    status: Mapped[Optional[Status]] = relationship(back_populates="repair_invoices")
    symptom: Mapped[Optional[Symptom]] = relationship(back_populates="repair_invoices")


MODELS = {
    "Device": Device,
    "Status": Status,
    "Symptom": Symptom,
    "RepairInvoice": RepairInvoice,
}
