"""create_vehicle_tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 10:00:00.000000

제조사(manufacturers) 및 차량(cars) 테이블 생성.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "manufacturers",
        sa.Column("code", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
    )
    op.create_table(
        "cars",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("condition", sa.String(10), nullable=False),
        sa.Column("body", sa.String(100), nullable=False),
        sa.Column("model", sa.String(100), nullable=False),
        sa.Column("manufacturer_code", sa.Integer(), sa.ForeignKey("manufacturers.code"), nullable=False),
        sa.Column("number_of_doors", sa.Integer(), nullable=True),
        sa.Column("fuel_type", sa.String(50), nullable=True),
        sa.Column("engine", sa.String(100), nullable=True),
        sa.Column("mileage", sa.Integer(), nullable=True),
        sa.Column("model_year", sa.Integer(), nullable=True),
        sa.Column("production_year", sa.Integer(), nullable=True),
        sa.Column("external_color", sa.String(50), nullable=True),
        sa.Column("lat", sa.Float(), nullable=False),
        sa.Column("lon", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_cars_manufacturer_code", "cars", ["manufacturer_code"])


def downgrade() -> None:
    op.drop_index("ix_cars_manufacturer_code", table_name="cars")
    op.drop_table("cars")
    op.drop_table("manufacturers")
