# barbershop_booking/reservations.py

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Callable, List, Optional

from barbershop_booking.config import settings
from barbershop_booking.errors import (
    BookingError,
    InvalidRequestError,
    RejectionReason,
    SlotConflictError,
)
from barbershop_booking.logger import logger
from barbershop_booking.models import Barbershop, Booking, Service
from barbershop_booking.slots import OperatingPolicy, filter_available, format_slot, generate_slots
from barbershop_booking.store import BookingStore


class ReservationState(str, Enum):
    idle = "idle"
    validating = "validating"
    checking = "checking"
    committing = "committing"
    confirmed = "confirmed"
    rejected = "rejected"


@dataclass(frozen=True)
class ReservationResult:
    state: ReservationState
    booking: Optional[Booking] = None
    reason: Optional[RejectionReason] = None
    detail: str = ""

    @property
    def confirmed(self) -> bool:
        return self.state == ReservationState.confirmed

    @classmethod
    def rejected(cls, error: BookingError) -> "ReservationResult":
        return cls(state=ReservationState.rejected, reason=error.reason, detail=error.message)


class ReservationCoordinator:
    """
    Turns a (barbershop, service, user, day, time) selection into a booking.

    validating -> checking -> committing -> confirmed | rejected

    Only the committing step writes. A slot that is free during checking can
    still be lost to a concurrent request; the store's unique constraint
    settles that and the loser gets slot_taken. Nothing is retried here.
    """

    def __init__(
        self,
        store: BookingStore,
        now: Callable[[], datetime] = datetime.now,
        min_advance_days: int = settings.MIN_ADVANCE_DAYS,
    ):
        self.store = store
        self.now = now
        self.min_advance_days = min_advance_days

    def earliest_bookable_day(self) -> date:
        return self.now().date() + timedelta(days=self.min_advance_days)

    def get_available_slots(
        self,
        barbershop: Optional[Barbershop],
        service: Optional[Service],
        day: Optional[date],
    ) -> List[time]:
        self._check_catalog(barbershop, service)
        if day is None:
            raise InvalidRequestError("A day must be selected")

        if day < self.earliest_bookable_day():
            return []

        slots = generate_slots(day, OperatingPolicy.for_barbershop(barbershop), now=self.now())
        bookings = self.store.list_bookings_for_day(barbershop.id, day)
        return filter_available(slots, bookings)

    def reserve(
        self,
        barbershop: Optional[Barbershop],
        service: Optional[Service],
        user_id: Optional[int],
        day: Optional[date],
        time_of_day: Optional[time],
    ) -> ReservationResult:
        state = ReservationState.idle
        try:
            state = self._transition(state, ReservationState.validating)
            policy = self._validate(barbershop, service, user_id, day, time_of_day)

            state = self._transition(state, ReservationState.checking)
            bookings = self.store.list_bookings_for_day(barbershop.id, day)
            free = filter_available(generate_slots(day, policy), bookings)
            if time_of_day not in free:
                raise SlotConflictError(f"{format_slot(time_of_day)} on {day} is no longer available")

            state = self._transition(state, ReservationState.committing)
            booking = self.store.create_booking(
                Booking(
                    user_id=user_id,
                    service_id=service.id,
                    barbershop_id=barbershop.id,
                    date=datetime.combine(day, time_of_day),
                )
            )
        except BookingError as exc:
            self._transition(state, ReservationState.rejected)
            logger.info(f"Reservation rejected ({exc.reason.value}): {exc.message}")
            return ReservationResult.rejected(exc)

        self._transition(state, ReservationState.confirmed)
        logger.info(
            f"Booking {booking.id} confirmed: barbershop {booking.barbershop_id}, "
            f"user {booking.user_id}, {booking.date:%Y-%m-%d %H:%M}"
        )
        return ReservationResult(state=ReservationState.confirmed, booking=booking)

    def _check_catalog(self, barbershop, service):
        if barbershop is None or service is None:
            raise InvalidRequestError("A barbershop and a service are required")
        if service.barbershop_id != barbershop.id:
            raise InvalidRequestError("Service is not offered by this barbershop")

    def _validate(self, barbershop, service, user_id, day, time_of_day) -> OperatingPolicy:
        self._check_catalog(barbershop, service)
        if user_id is None:
            raise InvalidRequestError("An authenticated user is required")
        if day is None or time_of_day is None:
            raise InvalidRequestError("Both a day and a time must be selected")

        earliest = self.earliest_bookable_day()
        if day < earliest:
            raise InvalidRequestError(f"Bookings open from {earliest} onward")

        policy = OperatingPolicy.for_barbershop(barbershop)
        if time_of_day not in generate_slots(day, policy, now=self.now()):
            raise InvalidRequestError(f"{format_slot(time_of_day)} is not a bookable slot")
        return policy

    @staticmethod
    def _transition(current: ReservationState, new: ReservationState) -> ReservationState:
        logger.debug(f"reservation {current.value} -> {new.value}")
        return new
