"""init_seating_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18

Schema:
- event: Events participants and reservations hang off (owned by the event catalogue)
- seat: Physical seats, shared across events
- participant: Ticket holders invited to one event
- seat_reservation: One participant holding one seat for one event
- seat_block: Seats withheld from sale for one event

Both seat_reservation and seat_block are unique on (event_id, seat_id).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all seating tables."""

    # ========== STEP 1: Reference tables ==========

    op.create_table(
        'event',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('date_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'seat',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('seat_row_id', sa.Integer(), nullable=True),
        sa.Column('order_number', sa.Integer(), nullable=True),
        sa.Column('price_category', sa.String(length=50), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_seat_seat_row_id'), 'seat', ['seat_row_id'], unique=False)

    op.create_table(
        'participant',
        sa.Column('participant_id', sa.String(length=50), nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=True),
        sa.Column('seat_color', sa.String(length=7), nullable=True),
        sa.Column('number_of_tickets', sa.Integer(), nullable=False, server_default='1'),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(['event_id'], ['event.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('participant_id'),
    )
    op.create_index(op.f('ix_participant_event_id'), 'participant', ['event_id'], unique=False)

    # ========== STEP 2: Reservation and block tables ==========

    op.create_table(
        'seat_reservation',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('seat_id', sa.Integer(), nullable=False),
        sa.Column('participant_id', sa.String(length=50), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['event.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['seat_id'], ['seat.id']),
        sa.ForeignKeyConstraint(
            ['participant_id'], ['participant.participant_id'], ondelete='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('event_id', 'seat_id', name='uq_seat_reservation_event_seat'),
    )
    op.create_index(
        op.f('ix_seat_reservation_event_id'), 'seat_reservation', ['event_id'], unique=False
    )
    op.create_index(
        op.f('ix_seat_reservation_participant_id'),
        'seat_reservation',
        ['participant_id'],
        unique=False,
    )

    op.create_table(
        'seat_block',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('seat_id', sa.Integer(), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(['event_id'], ['event.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['seat_id'], ['seat.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('event_id', 'seat_id', name='uq_seat_block_event_seat'),
    )
    op.create_index(op.f('ix_seat_block_event_id'), 'seat_block', ['event_id'], unique=False)


def downgrade() -> None:
    """Drop all tables in reverse order of creation (indexes dropped automatically)."""

    op.drop_table('seat_block')
    op.drop_table('seat_reservation')
    op.drop_table('participant')
    op.drop_table('seat')
    op.drop_table('event')
