# barbershop_booking/sheet.py

from datetime import date, time
from typing import List, Optional

from barbershop_booking.errors import RejectionReason, StoreUnavailableError
from barbershop_booking.logger import logger
from barbershop_booking.models import Barbershop, Service
from barbershop_booking.reservations import ReservationCoordinator, ReservationResult


class BookingSheet:
    """
    Selection state behind the "make a reservation" sheet of one service.

    Picking a day re-queries availability and clears the picked time. After a
    submit the selection is reset on success, loses only its time on
    slot_taken (with availability refreshed), and is left as is otherwise.
    When storage is unavailable during a refresh the slot list is emptied and
    `needs_reload` is set instead of raising.
    """

    def __init__(
        self,
        coordinator: ReservationCoordinator,
        barbershop: Barbershop,
        service: Service,
        user_id: Optional[int],
    ):
        self.coordinator = coordinator
        self.barbershop = barbershop
        self.service = service
        self.user_id = user_id

        self.day: Optional[date] = None
        self.time_of_day: Optional[time] = None
        self.available_slots: List[time] = []
        self.submitting = False
        self.needs_reload = False

    @property
    def can_submit(self) -> bool:
        return self.day is not None and self.time_of_day is not None and not self.submitting

    def select_day(self, day: Optional[date]):
        self.day = day
        self.time_of_day = None
        self.refresh()

    def select_time(self, time_of_day: time):
        self.time_of_day = time_of_day

    def refresh(self):
        self.needs_reload = False
        if self.day is None:
            self.available_slots = []
            return
        try:
            self.available_slots = self.coordinator.get_available_slots(self.barbershop, self.service, self.day)
        except StoreUnavailableError as exc:
            logger.warning(f"Could not load slots for {self.day}: {exc.message}")
            self.available_slots = []
            self.needs_reload = True

    def submit(self) -> ReservationResult:
        self.submitting = True
        try:
            result = self.coordinator.reserve(
                self.barbershop, self.service, self.user_id, self.day, self.time_of_day
            )
        finally:
            self.submitting = False

        if result.confirmed:
            self.day = None
            self.time_of_day = None
            self.available_slots = []
        elif result.reason == RejectionReason.slot_taken:
            self.time_of_day = None
            self.refresh()
        return result
