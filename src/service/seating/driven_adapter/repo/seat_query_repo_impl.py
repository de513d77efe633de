from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_seat_query_repo import ISeatQueryRepo
from src.service.seating.driven_adapter.model.seat_model import SeatModel


class SeatQueryRepoImpl(ISeatQueryRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def exists(self, *, seat_id: int) -> bool:
        result = await self.session.execute(select(SeatModel.id).where(SeatModel.id == seat_id))
        return result.scalar_one_or_none() is not None
