"""Initial schema: tenants, credentials, sessions and the tenant key-value store

Revision ID: 0001_initial_schema
Revises: 
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'tenants',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('display_name', sa.String(255), nullable=False),
        sa.Column('owner_name', sa.String(255), nullable=False),
        sa.Column('subscription_tier', sa.String(50), nullable=False, server_default='basic'),
        sa.Column('enabled_features', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.func.current_timestamp()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        'credentials',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('tenant_id', sa.String(64), sa.ForeignKey('tenants.id'), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.func.current_timestamp()),
    )
    op.create_index('ix_credentials_email', 'credentials', ['email'], unique=True)
    op.create_index('ix_credentials_tenant_id', 'credentials', ['tenant_id'])

    op.create_table(
        'auth_sessions',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('tenant_id', sa.String(64), sa.ForeignKey('tenants.id'), nullable=False),
        sa.Column('issued_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.func.current_timestamp()),
    )
    op.create_index('ix_auth_sessions_tenant_id', 'auth_sessions', ['tenant_id'])

    # Whole collections stored under "{tenant_id}_{collection}"
    op.create_table(
        'tenant_kv',
        sa.Column('key', sa.String(128), primary_key=True),
        sa.Column('value', sa.JSON(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )


def downgrade():
    op.drop_table('tenant_kv')
    op.drop_index('ix_auth_sessions_tenant_id', 'auth_sessions')
    op.drop_table('auth_sessions')
    op.drop_index('ix_credentials_tenant_id', 'credentials')
    op.drop_index('ix_credentials_email', 'credentials')
    op.drop_table('credentials')
    op.drop_table('tenants')
