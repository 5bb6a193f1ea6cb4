"""create users/workouts/exercises/sets + exercise catalogue

Revision ID: 4b1d7e0c9a52
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1d7e0c9a52'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


EXERCISES = [
    ("Bench Press", "Chest", "Barbell"),
    ("Incline Dumbbell Press", "Chest", "Dumbbell"),
    ("Push Up", "Chest", None),
    ("Back Squat", "Legs", "Barbell"),
    ("Leg Press", "Legs", "Machine"),
    ("Romanian Deadlift", "Legs", "Barbell"),
    ("Deadlift", "Back", "Barbell"),
    ("Pull Up", "Back", None),
    ("Bent Over Row", "Back", "Barbell"),
    ("Lat Pulldown", "Back", "Cable"),
    ("Overhead Press", "Shoulders", "Barbell"),
    ("Lateral Raise", "Shoulders", "Dumbbell"),
    ("Bicep Curl", "Arms", "Dumbbell"),
    ("Tricep Pushdown", "Arms", "Cable"),
    ("Plank", "Core", None),
]


def upgrade() -> None:
    # 1) users
    op.create_table(
        'users',
        sa.Column('user_id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(length=64), nullable=False),
        sa.Column('hashed_password', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    # 2) workouts
    op.create_table(
        'workouts',
        sa.Column('workout_id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('workout_name', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
    )

    # 3) exercises (reference data)
    exercises = op.create_table(
        'exercises',
        sa.Column('exercise_id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('muscle_group', sa.Text(), nullable=False),
        sa.Column('equipment', sa.Text(), nullable=True),
    )

    # 4) sets; (workout_id, exercise_id, set_order) intentionally not unique
    op.create_table(
        'sets',
        sa.Column('set_id', sa.Integer(), primary_key=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.workout_id', ondelete='CASCADE'), nullable=False),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.exercise_id'), nullable=False, index=True),
        sa.Column('set_order', sa.Integer(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Numeric(10, 2), nullable=True),
    )
    op.create_index('ix_sets_workout_exercise', 'sets', ['workout_id', 'exercise_id'])

    op.bulk_insert(
        exercises,
        [{"name": n, "muscle_group": g, "equipment": e} for n, g, e in EXERCISES],
    )


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_index('ix_sets_workout_exercise', table_name='sets')
    op.drop_table('sets')
    op.drop_table('exercises')
    op.drop_table('workouts')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
