from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


class SeatModel(Base):
    __tablename__ = 'seat'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    seat_row_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)
    order_number: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    price_category: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
