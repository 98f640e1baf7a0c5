# barbershop_booking/routers/bookings_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from barbershop_booking.auth import get_current_user
from barbershop_booking.db import get_session
from barbershop_booking.errors import RejectionReason, StoreUnavailableError
from barbershop_booking.models import Service
from barbershop_booking.reservations import ReservationCoordinator
from barbershop_booking.routers.barbershops_routes import get_barbershop_or_404, service_unavailable
from barbershop_booking.schemas import BookingCreate, BookingPublic
from barbershop_booking.store import BookingStore

router = APIRouter(
    tags=["bookings"],
)

REJECTION_STATUS = {
    RejectionReason.invalid_request: 422,
    RejectionReason.slot_taken: 409,
}


@router.post("/barbershops/{barbershop_id}/bookings", response_model=BookingPublic, status_code=201)
def create_booking(
    barbershop_id: int,
    booking: BookingCreate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    barbershop = get_barbershop_or_404(session, barbershop_id)
    service = session.get(Service, booking.service_id) if booking.service_id is not None else None

    coordinator = ReservationCoordinator(BookingStore(session))
    result = coordinator.reserve(
        barbershop,
        service,
        current_user["id"],
        booking.date,
        booking.time,
    )

    if result.reason == RejectionReason.unavailable:
        raise service_unavailable(result.detail)
    if not result.confirmed:
        raise HTTPException(
            status_code=REJECTION_STATUS[result.reason],
            detail={"reason": result.reason.value, "message": result.detail},
        )

    return result.booking


@router.get("/bookings/me", response_model=List[BookingPublic])
def list_my_bookings(
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    try:
        return BookingStore(session).list_bookings_for_user(current_user["id"])
    except StoreUnavailableError as exc:
        raise service_unavailable(exc.message)
