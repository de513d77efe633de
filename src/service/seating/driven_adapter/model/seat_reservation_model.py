from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


class SeatReservationModel(Base):
    __tablename__ = 'seat_reservation'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('event.id', ondelete='CASCADE'), nullable=False, index=True
    )
    seat_id: Mapped[int] = mapped_column(Integer, ForeignKey('seat.id'), nullable=False)
    participant_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey('participant.participant_id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )

    # One live reservation per seat per event: the only mutual exclusion between writers
    __table_args__ = (
        UniqueConstraint('event_id', 'seat_id', name='uq_seat_reservation_event_seat'),
    )
