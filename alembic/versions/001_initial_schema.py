"""initial schema

Revision ID: 001
Revises: 
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'team',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    # team_id stays nullable: a member may belong to no team
    op.create_table(
        'member',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('team_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['team_id'], ['team.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_member_username'), 'member', ['username'], unique=False)
    op.create_index(op.f('ix_member_team_id'), 'member', ['team_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_member_team_id'), table_name='member')
    op.drop_index(op.f('ix_member_username'), table_name='member')
    op.drop_table('member')
    op.drop_table('team')
