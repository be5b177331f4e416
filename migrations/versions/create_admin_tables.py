"""
Create applications, contact_messages and analytics_events tables

Revision ID: create_admin_tables
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = 'create_admin_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'applications',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('email', sa.String(length=120), nullable=False),
        sa.Column('whatsapp', sa.String(length=32), nullable=False),
        sa.Column('college', sa.String(length=256), nullable=False),
        sa.Column('specialization', sa.String(length=128), nullable=False),
        sa.Column('year_of_grad', sa.String(length=8), nullable=False),
        sa.Column('cgpa', sa.Float(), nullable=True),
        sa.Column('backlogs', sa.String(length=16), nullable=False, server_default='0'),
        sa.Column('job_title', sa.String(length=256), nullable=True),
        sa.Column('resume_url', sa.String(length=512), nullable=False),
        sa.Column('uploaded_at', sa.DateTime(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_table(
        'contact_messages',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('email', sa.String(length=120), nullable=False),
        sa.Column('subject', sa.String(length=256), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_table(
        'analytics_events',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('event_name', sa.String(length=128), nullable=False),
        sa.Column('event_category', sa.String(length=128), nullable=True),
        sa.Column('event_value', sa.String(length=256), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_analytics_events_event_name', 'analytics_events', ['event_name'])
    op.create_index('ix_analytics_events_created_at', 'analytics_events', ['created_at'])


def downgrade():
    op.drop_index('ix_analytics_events_created_at', table_name='analytics_events')
    op.drop_index('ix_analytics_events_event_name', table_name='analytics_events')
    op.drop_table('analytics_events')
    op.drop_table('contact_messages')
    op.drop_table('applications')
