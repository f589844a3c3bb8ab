"""create workouts, exercises and exercise_sets

Revision ID: 4b1d0c9e2a7f
Revises:
Create Date: 2026-10-19 10:12:31.504113

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1d0c9e2a7f'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) workouts: finished_at stays NULL while the workout is in progress
    op.create_table(
        'workouts',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('finished_at', sa.DateTime(timezone=True), nullable=True, index=True),
    )

    # 2) exercises: no FK to workouts, the workout row is written at finish
    op.create_table(
        'exercises',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('workout_id', sa.String(length=36), nullable=False, index=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='1'),
    )

    # 3) exercise_sets
    op.create_table(
        'exercise_sets',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('exercise_id', sa.String(length=36), sa.ForeignKey('exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('one_rm', sa.Float(), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default='1'),
    )


def downgrade() -> None:
    op.drop_table('exercise_sets')
    op.drop_table('exercises')
    op.drop_table('workouts')
