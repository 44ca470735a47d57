"""Create users, countries and visited_countries tables

Revision ID: 3f2a9c1d7b4e
Revises:
Create Date: 2026-10-19 10:12:41.503118

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f2a9c1d7b4e'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # Tables may already exist from db.create_all() at startup
    conn = op.get_bind()
    existing = sa.inspect(conn).get_table_names()

    if 'countries' not in existing:
        op.create_table('countries',
            sa.Column('country_code', sa.String(length=2), nullable=False),
            sa.Column('country_name', sa.String(length=100), nullable=False),
            sa.PrimaryKeyConstraint('country_code')
        )

    if 'users' not in existing:
        op.create_table('users',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(length=100), nullable=False),
            sa.Column('color', sa.String(length=30), nullable=False),
            sa.Column('family_id', sa.Integer(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_users_name'), 'users', ['name'], unique=False)
        op.create_index(op.f('ix_users_family_id'), 'users', ['family_id'], unique=False)

    if 'visited_countries' not in existing:
        op.create_table('visited_countries',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('country_code', sa.String(length=2), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.ForeignKeyConstraint(['country_code'], ['countries.country_code'], ),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_visited_countries_user_id'), 'visited_countries', ['user_id'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_visited_countries_user_id'), table_name='visited_countries')
    op.drop_table('visited_countries')
    op.drop_index(op.f('ix_users_family_id'), table_name='users')
    op.drop_index(op.f('ix_users_name'), table_name='users')
    op.drop_table('users')
    op.drop_table('countries')
