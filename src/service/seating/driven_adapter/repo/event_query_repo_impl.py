from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.seating.driven_adapter.model.event_model import EventModel


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def exists(self, *, event_id: int) -> bool:
        result = await self.session.execute(select(EventModel.id).where(EventModel.id == event_id))
        return result.scalar_one_or_none() is not None
