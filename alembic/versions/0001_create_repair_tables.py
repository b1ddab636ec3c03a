"""create device, status, symptom and repair_invoices tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "devices",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("device_id", sa.Integer(), nullable=True),
        sa.Column("customer_id", sa.Integer(), nullable=True),
        sa.UniqueConstraint("device_id", name="uq_devices_device_id"),
        sa.UniqueConstraint("customer_id", name="uq_devices_customer_id"),
    )
    op.create_table(
        "statuses",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("status_id", sa.Integer(), nullable=True),
        sa.Column("status_name", sa.String(length=255), nullable=False),
        sa.UniqueConstraint("status_id", name="uq_statuses_status_id"),
    )
    op.create_table(
        "symptoms",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("symptom_id", sa.Integer(), nullable=True),
        sa.Column("symptom_name", sa.String(length=255), nullable=False),
        sa.UniqueConstraint("symptom_id", name="uq_symptoms_symptom_id"),
    )
    op.create_table(
        "repair_invoices",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("repair_invoice_id", sa.Integer(), nullable=True),
        sa.Column("device_id", sa.Integer(), sa.ForeignKey("devices.id"), nullable=False),
        sa.Column("status_id", sa.Integer(), sa.ForeignKey("statuses.id"), nullable=True),
        sa.Column("symptom_id", sa.Integer(), sa.ForeignKey("symptoms.id"), nullable=True),
        sa.UniqueConstraint("repair_invoice_id", name="uq_repair_invoices_repair_invoice_id"),
        sa.UniqueConstraint("device_id", name="uq_repair_invoices_device_id"),
    )
    op.create_index("ix_repair_invoices_status_id", "repair_invoices", ["status_id"])
    op.create_index("ix_repair_invoices_symptom_id", "repair_invoices", ["symptom_id"])

def downgrade():
    op.drop_index("ix_repair_invoices_symptom_id", table_name="repair_invoices")
    op.drop_index("ix_repair_invoices_status_id", table_name="repair_invoices")
    op.drop_table("repair_invoices")
    op.drop_table("symptoms")
    op.drop_table("statuses")
    op.drop_table("devices")
