"""initial schema: category, transaction, budget

Revision ID: 0001_initial_schema
Revises:
Create Date: 2024-01-01 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'category',
        sa.Column('category_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_table(
        'transaction',
        sa.Column('transaction_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('category.category_id'), nullable=True),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('date', sa.String(), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_table(
        'budget',
        sa.Column('budget_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('category.category_id'), nullable=True),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('category_id', name='uq_budget_category_id'),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table('budget')
    op.drop_table('transaction')
    op.drop_table('category')
