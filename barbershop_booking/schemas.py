# barbershop_booking/schemas.py

from datetime import datetime, date as Date, time as Time
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserPublic(BaseModel):
    id: int
    email: str
    name: str


class UserCreate(BaseModel):
    email: str
    name: str = ""
    password: str = Field(min_length=8, max_length=72)


class ServicePublic(BaseModel):
    id: int
    barbershop_id: int
    name: str
    description: str
    price: Decimal
    image_url: Optional[str] = None


class BarbershopPublic(BaseModel):
    id: int
    name: str
    address: str
    image_url: Optional[str] = None


class BarbershopDetail(BarbershopPublic):
    description: str
    open_time: Time
    close_time: Time
    slot_minutes: int
    services: List[ServicePublic]


class AvailabilityResponse(BaseModel):
    barbershop_id: int
    service_id: int
    date: Date
    available_slots: List[str]


# Fields are optional so the coordinator, not the validator, reports what's missing
class BookingCreate(BaseModel):
    service_id: Optional[int] = None
    date: Optional[Date] = None
    time: Optional[Time] = None


class BookingPublic(BaseModel):
    id: int
    user_id: int
    service_id: int
    barbershop_id: int
    date: datetime
    created_at: datetime
