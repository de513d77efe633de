from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.entity.seat_block_entity import SeatBlock


class ListSeatBlocksUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def list_by_event(self, *, event_id: int) -> List[SeatBlock]:
        async with self.uow:
            if not await self.uow.event_query_repo.exists(event_id=event_id):
                raise NotFoundError('Event not found')
            return await self.uow.seat_block_command_repo.find_by_event(event_id=event_id)
