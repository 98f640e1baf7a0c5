# barbershop_booking/routers/users_routes.py

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from barbershop_booking.db import get_session
from barbershop_booking.models import User
from barbershop_booking.schemas import UserCreate, UserPublic
from barbershop_booking.auth import get_current_user, hash_password

router = APIRouter(
    tags=["users"],
)


@router.get("/me", response_model=UserPublic)
def me(current_user: dict = Depends(get_current_user)):
    return current_user


@router.post("/users", status_code=201, response_model=UserPublic)
def create_user(
    user: UserCreate,
    session: Session = Depends(get_session),
):
    existing = session.exec(
        select(User).where(User.email == user.email)
    ).first()
    if existing is not None:
        raise HTTPException(status_code=409, detail="Email already registered")

    db_user = User(
        email=user.email,
        name=user.name,
        password_hash=hash_password(user.password),
    )

    session.add(db_user)
    session.commit()
    session.refresh(db_user)  # fills db_user.id

    return {
        "id": db_user.id,
        "email": db_user.email,
        "name": db_user.name,
    }
