# This project was developed with assistance from AI tools.
"""create rate catalog

Revision ID: 3b7c1d9e2f40
Revises:
Create Date: 2026-10-12 10:14:22.418503

"""

import sqlalchemy as sa
from alembic import op

revision = "3b7c1d9e2f40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "lenders",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("logo_url", sa.Text(), nullable=True),
        sa.Column("website_url", sa.Text(), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_lenders_name", "lenders", ["name"])

    op.create_table(
        "mortgage_rates",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("lender_id", sa.Integer(), nullable=False),
        sa.Column("loan_type", sa.String(20), nullable=False),
        sa.Column("loan_term", sa.String(20), nullable=False),
        sa.Column("interest_rate", sa.Numeric(5, 3), nullable=False),
        sa.Column("apr", sa.Numeric(5, 3), nullable=False),
        sa.Column("points", sa.Numeric(5, 2), server_default=sa.text("0"), nullable=False),
        sa.Column("min_credit_score", sa.Integer(), nullable=False),
        sa.Column("max_loan_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("min_down_payment_percent", sa.Numeric(5, 2), nullable=False),
        sa.Column("closing_costs", sa.Numeric(10, 2), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.ForeignKeyConstraint(["lender_id"], ["lenders.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "min_credit_score BETWEEN 300 AND 850", name="ck_mortgage_rates_credit_score"
        ),
    )
    op.create_index("ix_mortgage_rates_lender_id", "mortgage_rates", ["lender_id"])
    # Matches the engine's exact-match predicates on product.
    op.create_index(
        "ix_mortgage_rates_product",
        "mortgage_rates",
        ["loan_type", "loan_term", "is_active"],
    )

    op.create_table(
        "mortgage_quote_requests",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("loan_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("property_value", sa.Numeric(12, 2), nullable=False),
        sa.Column("down_payment", sa.Numeric(12, 2), nullable=False),
        sa.Column("credit_score", sa.Integer(), nullable=False),
        sa.Column("loan_type", sa.String(20), nullable=False),
        sa.Column("loan_term", sa.String(20), nullable=False),
        sa.Column("property_type", sa.String(20), nullable=False),
        sa.Column("occupancy_type", sa.String(20), nullable=False),
        sa.Column("zip_code", sa.String(10), nullable=False),
        sa.Column("debt_to_income_ratio", sa.Numeric(5, 2), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_mortgage_quote_requests_created_at", "mortgage_quote_requests", ["created_at"]
    )

    op.create_table(
        "demo_data_manifest",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "seeded_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column("config_hash", sa.String(64), nullable=False),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("demo_data_manifest")
    op.drop_index("ix_mortgage_quote_requests_created_at", table_name="mortgage_quote_requests")
    op.drop_table("mortgage_quote_requests")
    op.drop_index("ix_mortgage_rates_product", table_name="mortgage_rates")
    op.drop_index("ix_mortgage_rates_lender_id", table_name="mortgage_rates")
    op.drop_table("mortgage_rates")
    op.drop_index("ix_lenders_name", table_name="lenders")
    op.drop_table("lenders")
