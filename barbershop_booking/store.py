# barbershop_booking/store.py

from contextlib import contextmanager
from datetime import date, datetime, timedelta
from typing import List

from sqlalchemy.exc import IntegrityError, OperationalError, TimeoutError as PoolTimeoutError
from sqlmodel import Session, select

from barbershop_booking.errors import SlotConflictError, StoreUnavailableError
from barbershop_booking.logger import logger
from barbershop_booking.models import Booking


class BookingStore:
    """
    Persisted bookings.

    Reads are unlocked and may be stale by the time they return. Writes rely on
    the (barbershop_id, date) unique constraint, so concurrent creates for the
    same slot end with exactly one row and SlotConflictError for the rest.
    Lock waits, timeouts and dropped connections surface as StoreUnavailableError.
    """

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _unavailable_on_failure(self, action: str):
        try:
            yield
        except (OperationalError, PoolTimeoutError) as exc:
            self.session.rollback()
            logger.warning(f"{action} failed: {exc}")
            raise StoreUnavailableError("Booking storage is temporarily unavailable") from exc

    def list_bookings_for_day(self, barbershop_id: int, day: date) -> List[Booking]:
        day_start_dt = datetime.combine(day, datetime.min.time())
        day_end_dt = day_start_dt + timedelta(days=1)

        stmt = (
            select(Booking)
            .where(Booking.barbershop_id == barbershop_id)
            .where(Booking.date >= day_start_dt)
            .where(Booking.date < day_end_dt)
        )
        with self._unavailable_on_failure(f"Day query for barbershop {barbershop_id} on {day}"):
            return list(self.session.exec(stmt).all())

    def list_bookings_for_user(self, user_id: int) -> List[Booking]:
        stmt = select(Booking).where(Booking.user_id == user_id).order_by(Booking.date)
        with self._unavailable_on_failure(f"Booking list for user {user_id}"):
            return list(self.session.exec(stmt).all())

    def create_booking(self, candidate: Booking) -> Booking:
        self.session.add(candidate)
        with self._unavailable_on_failure(f"Booking insert for barbershop {candidate.barbershop_id}"):
            try:
                self.session.commit()
            except IntegrityError as exc:
                self.session.rollback()
                raise SlotConflictError(
                    f"Barbershop {candidate.barbershop_id} already has a booking at {candidate.date:%Y-%m-%d %H:%M}"
                ) from exc

        self.session.refresh(candidate)  # fills candidate.id
        return candidate
