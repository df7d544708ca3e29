"""baseline_migration

Revision ID: 5c1e0a7d9b21
Revises: 
Create Date: 2026-10-19 10:12:41.118204

Creates companies, jobs, users and applications. Tables that already exist
are left untouched.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '5c1e0a7d9b21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def table_exists(table_name: str) -> bool:
    """Check if a table exists in the database."""
    bind = op.get_bind()
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade() -> None:
    if not table_exists('companies'):
        op.create_table('companies',
            sa.Column('handle', sa.String(length=25), nullable=False),
            sa.Column('name', sa.Text(), nullable=False),
            sa.Column('num_employees', sa.Integer(), nullable=True),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('logo_url', sa.Text(), nullable=True),
            sa.CheckConstraint('num_employees >= 0', name='ck_companies_num_employees'),
            sa.PrimaryKeyConstraint('handle'),
            sa.UniqueConstraint('name')
        )

    if not table_exists('jobs'):
        op.create_table('jobs',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('title', sa.Text(), nullable=False),
            sa.Column('salary', sa.Integer(), nullable=True),
            sa.Column('equity', sa.Numeric(), nullable=True),
            sa.Column('company_handle', sa.String(length=25), nullable=False),
            sa.CheckConstraint('salary >= 0', name='ck_jobs_salary'),
            sa.CheckConstraint('equity <= 1.0', name='ck_jobs_equity'),
            sa.ForeignKeyConstraint(['company_handle'], ['companies.handle'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_jobs_company_handle'), 'jobs', ['company_handle'], unique=False)

    if not table_exists('users'):
        op.create_table('users',
            sa.Column('username', sa.String(length=25), nullable=False),
            sa.Column('password', sa.Text(), nullable=False),
            sa.Column('first_name', sa.Text(), nullable=False),
            sa.Column('last_name', sa.Text(), nullable=False),
            sa.Column('email', sa.Text(), nullable=False),
            sa.Column('is_admin', sa.Boolean(), server_default=sa.false(), nullable=False),
            sa.PrimaryKeyConstraint('username')
        )

    if not table_exists('applications'):
        op.create_table('applications',
            sa.Column('username', sa.String(length=25), nullable=False),
            sa.Column('job_id', sa.Integer(), nullable=False),
            sa.Column('applied_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['username'], ['users.username'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('username', 'job_id')
        )


def downgrade() -> None:
    op.drop_table('applications')
    op.drop_table('users')
    op.drop_index(op.f('ix_jobs_company_handle'), table_name='jobs')
    op.drop_table('jobs')
    op.drop_table('companies')
