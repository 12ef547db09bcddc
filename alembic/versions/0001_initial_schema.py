"""initial_schema

Creates companies, jobs, users, technologies and the three join tables
(applications, job_technologies, user_technologies).

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'companies',
        sa.Column('handle', sa.String(25), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False, unique=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('num_employees', sa.Integer(), nullable=True),
        sa.Column('logo_url', sa.Text(), nullable=True),
        sa.CheckConstraint('num_employees >= 0', name='ck_companies_num_employees'),
    )

    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('salary', sa.Integer(), nullable=True),
        sa.Column('equity', sa.Float(), nullable=True),
        sa.Column('company_handle', sa.String(25), nullable=False),
        sa.ForeignKeyConstraint(['company_handle'], ['companies.handle'], ondelete='CASCADE'),
        sa.CheckConstraint('salary >= 0', name='ck_jobs_salary'),
        sa.CheckConstraint('equity <= 1.0', name='ck_jobs_equity'),
    )
    op.create_index('ix_jobs_id', 'jobs', ['id'])
    op.create_index('ix_jobs_title', 'jobs', ['title'])
    op.create_index('ix_jobs_company_handle', 'jobs', ['company_handle'])

    op.create_table(
        'users',
        sa.Column('username', sa.String(25), primary_key=True),
        sa.Column('password', sa.Text(), nullable=False),
        sa.Column('first_name', sa.Text(), nullable=False),
        sa.Column('last_name', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        'technologies',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False, unique=True),
    )
    op.create_index('ix_technologies_id', 'technologies', ['id'])

    op.create_table(
        'applications',
        sa.Column('username', sa.String(25), primary_key=True),
        sa.Column('job_id', sa.Integer(), primary_key=True),
        sa.ForeignKeyConstraint(['username'], ['users.username'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
    )

    # UNIQUE (subject, tech_id) is the guard against duplicate links
    op.create_table(
        'job_technologies',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('job_id', sa.Integer(), nullable=False),
        sa.Column('tech_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['tech_id'], ['technologies.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('job_id', 'tech_id', name='uq_job_technologies_job_tech'),
    )
    op.create_index('ix_job_technologies_job_id', 'job_technologies', ['job_id'])
    op.create_index('ix_job_technologies_tech_id', 'job_technologies', ['tech_id'])

    op.create_table(
        'user_technologies',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_username', sa.String(25), nullable=False),
        sa.Column('tech_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_username'], ['users.username'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['tech_id'], ['technologies.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('user_username', 'tech_id', name='uq_user_technologies_user_tech'),
    )
    op.create_index('ix_user_technologies_user_username', 'user_technologies', ['user_username'])
    op.create_index('ix_user_technologies_tech_id', 'user_technologies', ['tech_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('user_technologies')
    op.drop_table('job_technologies')
    op.drop_table('applications')
    op.drop_table('technologies')
    op.drop_table('users')
    op.drop_table('jobs')
    op.drop_table('companies')
