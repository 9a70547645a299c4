"""Customers, accounts and operations.

Revision ID: 0001
Revises:
Create Date: 2024-03-17 10:00:00
"""

from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


account_status_enum = sa.Enum(
    "CREATED", "ACTIVATED", "SUSPENDED",
    name="account_status_enum", create_constraint=True,
)
account_type_enum = sa.Enum(
    "CURRENT", "SAVINGS",
    name="account_type_enum", create_constraint=True,
)
operation_type_enum = sa.Enum(
    "DEPOSIT", "WITHDRAWAL", "TRANSFER",
    name="operation_type_enum", create_constraint=True,
)


def upgrade() -> None:
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(20), nullable=False),
        sa.Column("email", sa.String(30), nullable=False),
    )
    op.create_index("ix_customers_name", "customers", ["name"])

    op.create_table(
        "accounts",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("balance", sa.Numeric(19, 2), nullable=False),
        sa.Column("status", account_status_enum, nullable=False),
        sa.Column("account_type", account_type_enum, nullable=False),
        sa.Column(
            "customer_id", sa.Integer(),
            sa.ForeignKey("customers.id"), nullable=False,
        ),
        sa.Column("created_on", sa.DateTime(timezone=True), nullable=False),
        sa.Column("modified_on", sa.DateTime(timezone=True), nullable=True),
        sa.Column("overdraft_limit", sa.Numeric(19, 2), nullable=True),
        sa.Column("interest_rate", sa.Numeric(7, 4), nullable=True),
    )
    op.create_index("ix_accounts_customer_id", "accounts", ["customer_id"])

    op.create_table(
        "operations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("amount", sa.Numeric(19, 2), nullable=False),
        sa.Column("operation_type", operation_type_enum, nullable=False),
        sa.Column("operation_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column(
            "account_id", sa.String(36),
            sa.ForeignKey("accounts.id"), nullable=False,
        ),
    )
    op.create_index("ix_operations_account_id", "operations", ["account_id"])
    op.create_index("ix_operations_operation_date", "operations", ["operation_date"])


def downgrade() -> None:
    op.drop_index("ix_operations_operation_date", table_name="operations")
    op.drop_index("ix_operations_account_id", table_name="operations")
    op.drop_table("operations")
    op.drop_index("ix_accounts_customer_id", table_name="accounts")
    op.drop_table("accounts")
    op.drop_index("ix_customers_name", table_name="customers")
    op.drop_table("customers")
    operation_type_enum.drop(op.get_bind(), checkfirst=True)
    account_type_enum.drop(op.get_bind(), checkfirst=True)
    account_status_enum.drop(op.get_bind(), checkfirst=True)
