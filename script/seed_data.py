#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the database

Features:
1. Ensure Tables - create tables from ORM metadata (no-op when Alembic already ran)
2. Create Event - one demo event
3. Create Seats - a small grid of seats shared by every event
4. Create Participants - a few ticket holders for the demo event

Notes:
- Reservations and seat blocks are not seeded: create them via
  PUT /api/event/{event_id}/reservations and PUT /api/event/{event_id}/seat-blocks
"""

import asyncio
from dataclasses import dataclass

from sqlalchemy import func, select

from src.platform.database.db_setting import (
    Database,
    create_db_and_tables,
    dispose_engine,
)
from src.service.seating.driven_adapter.model import EventModel, ParticipantModel, SeatModel

SEAT_ROWS = 5
SEATS_PER_ROW = 10


@dataclass
class ParticipantConfig:
    """Participant seed configuration"""

    participant_id: str
    name: str
    number_of_tickets: int
    seat_color: str


DEMO_PARTICIPANTS = [
    ParticipantConfig(participant_id='P-0001', name='Alice', number_of_tickets=2, seat_color='#E57373'),
    ParticipantConfig(participant_id='P-0002', name='Bob', number_of_tickets=1, seat_color='#64B5F6'),
    ParticipantConfig(participant_id='P-0003', name='Carol', number_of_tickets=4, seat_color='#81C784'),
]


async def seed() -> None:
    database = Database()

    async with database.session() as session:
        event_count = (await session.execute(select(func.count(EventModel.id)))).scalar_one()
        if event_count:
            print('⏭️  Data already seeded, skipping')
            return

        event = EventModel(name='Demo Event')
        session.add(event)

        session.add_all(
            SeatModel(seat_row_id=row, order_number=order, price_category='standard')
            for row in range(1, SEAT_ROWS + 1)
            for order in range(1, SEATS_PER_ROW + 1)
        )
        await session.flush()
        print(f'   ✅ Event created (id={event.id})')
        print(f'   ✅ {SEAT_ROWS * SEATS_PER_ROW} seats created')

        session.add_all(
            ParticipantModel(
                participant_id=participant.participant_id,
                event_id=event.id,
                name=participant.name,
                number_of_tickets=participant.number_of_tickets,
                seat_color=participant.seat_color,
            )
            for participant in DEMO_PARTICIPANTS
        )
        await session.commit()
        print(f'   ✅ {len(DEMO_PARTICIPANTS)} participants created')


async def main():
    print('🌱 Starting database seed...')
    print('=' * 50)

    try:
        await create_db_and_tables()
        await seed()
        print('=' * 50)
        print('✅ Database seed completed!')
    except Exception as e:
        print(f'❌ Seed failed: {e}')
        exit(1)
    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
