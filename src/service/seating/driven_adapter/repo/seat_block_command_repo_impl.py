from typing import List, cast

from sqlalchemy import CursorResult, delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_seat_block_command_repo import ISeatBlockCommandRepo
from src.service.seating.domain.entity.seat_block_entity import SeatBlock
from src.service.seating.driven_adapter.model.seat_block_model import SeatBlockModel


_seat_block = SeatBlockModel.__table__


class SeatBlockCommandRepoImpl(ISeatBlockCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def exists(self, *, event_id: int, seat_id: int) -> bool:
        result = await self.session.execute(
            select(_seat_block.c.id)
            .where(_seat_block.c.event_id == event_id, _seat_block.c.seat_id == seat_id)
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    @Logger.io
    async def insert(self, *, event_id: int, seat_id: int) -> int:
        # A block created concurrently counts as 0 rows rather than a constraint error
        dialect_insert = (
            sqlite_insert if self.session.get_bind().dialect.name == 'sqlite' else pg_insert
        )
        stmt = (
            dialect_insert(_seat_block)
            .values(event_id=event_id, seat_id=seat_id)
            .on_conflict_do_nothing(index_elements=['event_id', 'seat_id'])
        )
        result = cast(CursorResult, await self.session.execute(stmt))
        return result.rowcount

    @Logger.io
    async def delete_by_event_and_seat(self, *, event_id: int, seat_id: int) -> int:
        result = cast(
            CursorResult,
            await self.session.execute(
                delete(_seat_block).where(
                    _seat_block.c.event_id == event_id, _seat_block.c.seat_id == seat_id
                )
            ),
        )
        return result.rowcount

    @Logger.io
    async def find_by_event(self, *, event_id: int) -> List[SeatBlock]:
        result = await self.session.execute(
            select(
                _seat_block.c.id,
                _seat_block.c.event_id,
                _seat_block.c.seat_id,
                _seat_block.c.created_at,
            )
            .where(_seat_block.c.event_id == event_id)
            .order_by(_seat_block.c.id)
        )
        return [
            SeatBlock(
                id=row.id,
                event_id=row.event_id,
                seat_id=row.seat_id,
                created_at=row.created_at,
            )
            for row in result
        ]
