# barbershop_booking/routers/barbershops_routes.py

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from barbershop_booking.db import get_session
from barbershop_booking.errors import InvalidRequestError, RejectionReason, StoreUnavailableError
from barbershop_booking.models import Barbershop, Service
from barbershop_booking.reservations import ReservationCoordinator
from barbershop_booking.schemas import AvailabilityResponse, BarbershopDetail, BarbershopPublic
from barbershop_booking.slots import format_slot
from barbershop_booking.store import BookingStore

router = APIRouter(
    prefix="/barbershops",
    tags=["barbershops"],
)


def get_barbershop_or_404(session: Session, barbershop_id: int) -> Barbershop:
    barbershop = session.get(Barbershop, barbershop_id)
    if barbershop is None:
        raise HTTPException(status_code=404, detail="Barbershop not found")
    return barbershop


def get_service_or_404(session: Session, barbershop: Barbershop, service_id: int) -> Service:
    service = session.get(Service, service_id)
    if service is None or service.barbershop_id != barbershop.id:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


def service_unavailable(message: str) -> HTTPException:
    return HTTPException(
        status_code=503,
        detail={"reason": RejectionReason.unavailable.value, "message": message},
        headers={"Retry-After": "1"},
    )


@router.get("", response_model=List[BarbershopPublic])
def list_barbershops(session: Session = Depends(get_session)):
    return session.exec(select(Barbershop).order_by(Barbershop.name)).all()


@router.get("/{barbershop_id}", response_model=BarbershopDetail)
def get_barbershop(barbershop_id: int, session: Session = Depends(get_session)):
    barbershop = get_barbershop_or_404(session, barbershop_id)
    services = session.exec(
        select(Service)
        .where(Service.barbershop_id == barbershop.id)
        .order_by(Service.name)
    ).all()

    return {
        **barbershop.model_dump(),
        "services": [s.model_dump() for s in services],
    }


@router.get("/{barbershop_id}/services/{service_id}/availability", response_model=AvailabilityResponse)
def service_availability(
    barbershop_id: int,
    service_id: int,
    day: date,
    session: Session = Depends(get_session),
):
    barbershop = get_barbershop_or_404(session, barbershop_id)
    service = get_service_or_404(session, barbershop, service_id)

    coordinator = ReservationCoordinator(BookingStore(session))
    try:
        slots = coordinator.get_available_slots(barbershop, service, day)
    except InvalidRequestError as exc:
        raise HTTPException(status_code=422, detail=exc.message)
    except StoreUnavailableError as exc:
        raise service_unavailable(exc.message)

    return {
        "barbershop_id": barbershop.id,
        "service_id": service.id,
        "date": day,
        "available_slots": [format_slot(s) for s in slots],
    }
