# barbershop_booking/models.py

from typing import Optional
from datetime import datetime, time
from decimal import Decimal

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import SQLModel, Field, Column

from barbershop_booking.config import settings


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True)
    name: str = ""
    password_hash: str


class Barbershop(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    address: str = ""
    description: str = ""
    image_url: Optional[str] = None

    # operating-hours policy
    open_time: time = Field(default_factory=lambda: time.fromisoformat(settings.DEFAULT_OPEN_TIME))
    close_time: time = Field(default_factory=lambda: time.fromisoformat(settings.DEFAULT_CLOSE_TIME))
    slot_minutes: int = Field(default_factory=lambda: settings.DEFAULT_SLOT_MINUTES)


class Service(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    barbershop_id: int = Field(foreign_key="barbershop.id", index=True)
    name: str
    description: str = ""
    price: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)
    image_url: Optional[str] = None


class Booking(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("barbershop_id", "date", name="uq_barbershop_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: int = Field(foreign_key="user.id", index=True)
    service_id: int = Field(foreign_key="service.id")
    barbershop_id: int = Field(foreign_key="barbershop.id", index=True)
    # naive local time, minute granularity
    date: datetime = Field(sa_column=Column(DateTime(timezone=False), nullable=False))
    created_at: datetime = Field(
        default_factory=datetime.now,
        sa_column=Column(DateTime(timezone=False), nullable=False),
    )
