# barbershop_booking/slots.py

from datetime import date, datetime, time, timedelta
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field, model_validator

from barbershop_booking.models import Barbershop, Booking


class OperatingPolicy(BaseModel):
    open_time: time
    close_time: time
    slot_minutes: int = Field(gt=0)

    @model_validator(mode="after")
    def check_hours(self):
        if self.open_time >= self.close_time:
            raise ValueError("open_time must be earlier than close_time")
        return self

    @classmethod
    def for_barbershop(cls, barbershop: Barbershop) -> "OperatingPolicy":
        return cls(
            open_time=barbershop.open_time,
            close_time=barbershop.close_time,
            slot_minutes=barbershop.slot_minutes,
        )


def generate_slots(day: date, policy: OperatingPolicy, now: Optional[datetime] = None) -> List[time]:
    """
    Candidate start times for `day`, ascending, from opening time up to the
    last slot that still fits before closing time.

    When `now` is given, anything at or before it is dropped, so past days
    come back empty and today only keeps what's still ahead.
    """
    work_start = datetime.combine(day, policy.open_time)
    work_end = datetime.combine(day, policy.close_time)
    slot_delta = timedelta(minutes=policy.slot_minutes)

    slots = []
    current = work_start
    while current + slot_delta <= work_end:
        if now is None or current > now:
            slots.append(current.time())
        current += slot_delta

    return slots


def filter_available(slots: Iterable[time], bookings: Iterable[Booking]) -> List[time]:
    # caller fetched `bookings` for a single day, so hour/minute is enough
    taken = {(b.date.hour, b.date.minute) for b in bookings}
    return [slot for slot in slots if (slot.hour, slot.minute) not in taken]


def format_slot(slot: time) -> str:
    return slot.strftime("%H:%M")
