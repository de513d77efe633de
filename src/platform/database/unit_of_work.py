"""
Unit of Work Pattern - one database session and transaction per use case call

Architecture:
- UoW owns the session lifecycle (open on enter, close on exit)
- UoW owns commit/rollback; leaving the block without commit rolls back
- Repositories share the UoW session, so every statement of one `apply`
  runs inside the same transaction
"""

from __future__ import annotations

import abc
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.seating.app.interface.i_event_query_repo import IEventQueryRepo
    from src.service.seating.app.interface.i_participant_query_repo import (
        IParticipantQueryRepo,
    )
    from src.service.seating.app.interface.i_seat_block_command_repo import (
        ISeatBlockCommandRepo,
    )
    from src.service.seating.app.interface.i_seat_query_repo import ISeatQueryRepo
    from src.service.seating.app.interface.i_seat_reservation_command_repo import (
        ISeatReservationCommandRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the Seating Service

    Usage:
        async with uow:
            inserted = await uow.seat_reservation_command_repo.bulk_insert(...)
            await uow.commit()
    """

    # Lookups
    event_query_repo: IEventQueryRepo
    participant_query_repo: IParticipantQueryRepo
    seat_query_repo: ISeatQueryRepo

    # Writes
    seat_reservation_command_repo: ISeatReservationCommandRepo
    seat_block_command_repo: ISeatBlockCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    Usage in use case:
        async with self.uow:
            reservations = await self.uow.seat_reservation_command_repo.find_by_event(...)
            await self.uow.commit()
    """

    def __init__(
        self, *, session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]]
    ) -> None:
        self.session_factory = session_factory
        self._session_cm: Optional[AbstractAsyncContextManager[AsyncSession]] = None
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.seating.driven_adapter.repo.event_query_repo_impl import (
            EventQueryRepoImpl,
        )
        from src.service.seating.driven_adapter.repo.participant_query_repo_impl import (
            ParticipantQueryRepoImpl,
        )
        from src.service.seating.driven_adapter.repo.seat_block_command_repo_impl import (
            SeatBlockCommandRepoImpl,
        )
        from src.service.seating.driven_adapter.repo.seat_query_repo_impl import (
            SeatQueryRepoImpl,
        )
        from src.service.seating.driven_adapter.repo.seat_reservation_command_repo_impl import (
            SeatReservationCommandRepoImpl,
        )

        self._session_cm = self.session_factory()
        self.session = await self._session_cm.__aenter__()

        # Every repo shares the UoW session (one transaction)
        self.event_query_repo = EventQueryRepoImpl(session=self.session)
        self.participant_query_repo = ParticipantQueryRepoImpl(session=self.session)
        self.seat_query_repo = SeatQueryRepoImpl(session=self.session)
        self.seat_reservation_command_repo = SeatReservationCommandRepoImpl(session=self.session)
        self.seat_block_command_repo = SeatBlockCommandRepoImpl(session=self.session)

        return await super().__aenter__()

    async def __aexit__(self, *args) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self._session_cm is not None:
                await self._session_cm.__aexit__(*args)
            self._session_cm = None
            self.session = None

    async def _commit(self) -> None:
        assert self.session is not None, 'UnitOfWork used outside of `async with`'
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
