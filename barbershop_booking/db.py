# barbershop_booking/db.py

from sqlmodel import SQLModel, create_engine, Session

from barbershop_booking.config import settings


def timeout_connect_args(url: str, timeout: float) -> dict:
    """Driver settings that stop lock and statement waits after `timeout` seconds."""
    seconds = max(1, int(timeout))
    millis = int(timeout * 1000)

    if url.startswith("sqlite"):
        return {
            "check_same_thread": False,  # required for SQLite + FastAPI
            "timeout": timeout,
        }
    if url.startswith("postgresql"):
        return {
            "connect_timeout": seconds,
            "options": f"-c lock_timeout={millis} -c statement_timeout={millis}",
        }
    if url.startswith("mysql"):
        return {
            "connect_timeout": seconds,
            "read_timeout": seconds,
            "write_timeout": seconds,
            "init_command": f"SET SESSION innodb_lock_wait_timeout = {seconds}",
        }
    return {}


def build_engine(
    url: str = settings.DATABASE_URL,
    echo: bool = settings.DB_ECHO,
    timeout: float = settings.DB_TIMEOUT_SECONDS,
    **kwargs,
):
    if not url.startswith("sqlite"):
        # waiting for a pooled connection is bounded too
        kwargs.setdefault("pool_timeout", timeout)
    return create_engine(url, echo=echo, connect_args=timeout_connect_args(url, timeout), **kwargs)


engine = build_engine()


def create_db_and_tables(bind=None):
    SQLModel.metadata.create_all(bind or engine)


# Dependency: one session per request
def get_session():
    with Session(engine) as session:
        yield session
