import os

# keep test runs off the real database file and error log
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FILE", "")

from datetime import date, time, timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from barbershop_booking.auth import get_current_user
from barbershop_booking.db import create_db_and_tables, get_session
from barbershop_booking.main import app
from barbershop_booking.models import Barbershop, Service, User

FUTURE_DAY = date.today() + timedelta(days=30)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def barbershop(session):
    shop = Barbershop(
        name="Vintage Barber",
        address="Rua das Flores, 12",
        open_time=time(9, 0),
        close_time=time(12, 0),
        slot_minutes=60,
    )
    session.add(shop)
    session.commit()
    session.refresh(shop)
    return shop


@pytest.fixture
def service(session, barbershop):
    haircut = Service(
        barbershop_id=barbershop.id,
        name="Haircut",
        description="Classic cut",
        price=Decimal("60.00"),
    )
    session.add(haircut)
    session.commit()
    session.refresh(haircut)
    return haircut


@pytest.fixture
def other_service(session):
    shop = Barbershop(name="Corner Cuts", open_time=time(10, 0), close_time=time(18, 0), slot_minutes=30)
    session.add(shop)
    session.commit()
    session.refresh(shop)

    shave = Service(barbershop_id=shop.id, name="Shave", price=Decimal("35.50"))
    session.add(shave)
    session.commit()
    session.refresh(shave)
    return shave


@pytest.fixture
def user(session):
    customer = User(email="ana@example.com", name="Ana", password_hash="x")
    session.add(customer)
    session.commit()
    session.refresh(customer)
    return customer


@pytest.fixture
def second_user(session):
    customer = User(email="bruno@example.com", name="Bruno", password_hash="x")
    session.add(customer)
    session.commit()
    session.refresh(customer)
    return customer


@pytest.fixture
def client(session, user):
    def override_session():
        yield session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_current_user] = lambda: {
        "id": user.id,
        "email": user.email,
        "name": user.name,
    }
    yield TestClient(app)
    app.dependency_overrides.clear()
