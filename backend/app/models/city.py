from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base
from app.models.country import Country
from app.models.state import State


class City(Base):
    """ORM model for the ``cities`` table."""

    __tablename__ = "cities"

    city_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    country_id: Mapped[int] = mapped_column(
        ForeignKey("countries.country_id"), nullable=False, index=True
    )
    state_id: Mapped[int] = mapped_column(
        ForeignKey("states.state_id"), nullable=False, index=True
    )
    city_name: Mapped[str] = mapped_column(String(120), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    country: Mapped[Country] = relationship(Country)
    state: Mapped[State] = relationship(State)
