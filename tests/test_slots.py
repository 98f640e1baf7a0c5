from datetime import date, datetime, time

import pytest
from pydantic import ValidationError

from barbershop_booking.models import Barbershop, Booking
from barbershop_booking.slots import OperatingPolicy, filter_available, format_slot, generate_slots

DAY = date(2031, 3, 14)
MORNING = OperatingPolicy(open_time=time(9, 0), close_time=time(12, 0), slot_minutes=60)


def booking_at(hour, minute=0, day=DAY):
    return Booking(user_id=1, service_id=1, barbershop_id=1, date=datetime.combine(day, time(hour, minute)))


def test_generates_hourly_slots_between_open_and_close():
    assert generate_slots(DAY, MORNING) == [time(9, 0), time(10, 0), time(11, 0)]


def test_same_inputs_give_same_slots():
    policy = OperatingPolicy(open_time=time(9, 0), close_time=time(21, 0), slot_minutes=30)
    assert generate_slots(DAY, policy) == generate_slots(DAY, policy)


def test_slots_are_strictly_ascending():
    policy = OperatingPolicy(open_time=time(8, 15), close_time=time(20, 0), slot_minutes=25)
    slots = generate_slots(DAY, policy)
    assert all(a < b for a, b in zip(slots, slots[1:]))


def test_unreachable_close_stops_at_last_fitting_slot():
    policy = OperatingPolicy(open_time=time(9, 0), close_time=time(11, 0), slot_minutes=45)
    # 10:30 would run until 11:15
    assert generate_slots(DAY, policy) == [time(9, 0), time(9, 45)]


def test_now_drops_past_slots_of_the_same_day():
    now = datetime.combine(DAY, time(10, 0))
    assert generate_slots(DAY, MORNING, now=now) == [time(11, 0)]


def test_now_empties_past_days_and_keeps_future_days():
    now = datetime(2031, 3, 15, 8, 0)
    assert generate_slots(DAY, MORNING, now=now) == []
    assert generate_slots(date(2031, 3, 16), MORNING, now=now) == generate_slots(DAY, MORNING)


def test_policy_rejects_close_before_open():
    with pytest.raises(ValidationError):
        OperatingPolicy(open_time=time(12, 0), close_time=time(9, 0), slot_minutes=30)


def test_policy_rejects_non_positive_granularity():
    with pytest.raises(ValidationError):
        OperatingPolicy(open_time=time(9, 0), close_time=time(12, 0), slot_minutes=0)


def test_filter_drops_booked_slot():
    slots = generate_slots(DAY, MORNING)
    assert filter_available(slots, [booking_at(10)]) == [time(9, 0), time(11, 0)]


def test_filter_excludes_exactly_the_booked_times():
    policy = OperatingPolicy(open_time=time(9, 0), close_time=time(18, 0), slot_minutes=30)
    slots = generate_slots(DAY, policy)
    bookings = [booking_at(9), booking_at(12, 30), booking_at(17, 30)]

    available = filter_available(slots, bookings)

    booked = {b.date.time() for b in bookings}
    assert set(available) == set(slots) - booked
    assert available == sorted(available)


def test_filter_ignores_bookings_off_the_grid():
    slots = generate_slots(DAY, MORNING)
    assert filter_available(slots, [booking_at(9, 30)]) == slots


def test_filter_can_leave_nothing():
    slots = generate_slots(DAY, MORNING)
    assert filter_available(slots, [booking_at(9), booking_at(10), booking_at(11)]) == []


def test_format_slot():
    assert format_slot(time(9, 5)) == "09:05"


def test_barbershop_without_own_hours_uses_configured_defaults():
    policy = OperatingPolicy.for_barbershop(Barbershop(name="Default Hours"))
    slots = generate_slots(DAY, policy)
    assert slots[0] == time(9, 0)
    assert slots[-1] == time(20, 30)
    assert len(slots) == 24
