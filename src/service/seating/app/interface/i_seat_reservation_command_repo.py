"""
Seat Reservation Command Repository Interface

Backed by a table with a uniqueness constraint on (event_id, seat_id).
Each bulk method runs ONE set-oriented statement and returns the number of rows it
actually affected; comparing that count with the number requested is how callers
detect lost races.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, Set

from src.service.seating.domain.entity.reservation_entity import Reservation
from src.service.seating.domain.value_object.reservation_change import (
    ReservationKey,
    ReservationReassignment,
    SeatAssignment,
)


class ISeatReservationCommandRepo(ABC):
    @abstractmethod
    async def bulk_insert(self, *, event_id: int, assignments: Sequence[SeatAssignment]) -> int:
        """
        Insert a reservation for every assignment whose seat is still free for the event

        Seats already reserved are skipped, not overwritten.

        Returns:
            Number of rows inserted

        Raises:
            ConflictError: the store's uniqueness constraint rejected the statement
        """
        pass

    @abstractmethod
    async def bulk_delete(self, *, event_id: int, keys: Sequence[ReservationKey]) -> int:
        """
        Delete reservations matching (reservation_id, participant_id) within the event

        Returns:
            Number of rows deleted
        """
        pass

    @abstractmethod
    async def bulk_update(
        self, *, event_id: int, reassignments: Sequence[ReservationReassignment]
    ) -> int:
        """
        Set participant_id and seat_id per reservation_id, scoped to the event

        A reassignment without seat_id keeps the row's current seat.

        Returns:
            Number of rows updated

        Raises:
            ConflictError: a reassignment moved onto a seat that is already reserved
        """
        pass

    @abstractmethod
    async def find_existing_ids(
        self, *, event_id: int, reservation_ids: Sequence[int]
    ) -> Set[int]:
        """Subset of `reservation_ids` that exist within the event"""
        pass

    @abstractmethod
    async def find_by_event(self, *, event_id: int) -> List[Reservation]:
        pass
