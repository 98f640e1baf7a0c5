# barbershop_booking/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Barbershop Booking API"
    ENVIRONMENT: str = "development"
    PORT: int = 8000

    # Database
    DATABASE_URL: str = "sqlite:///./barbershop.db"
    DB_ECHO: bool = False
    DB_TIMEOUT_SECONDS: float = 5.0

    # Auth
    SECRET_KEY: str = "change-me-later"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Operating hours used when a barbershop doesn't set its own
    DEFAULT_OPEN_TIME: str = "09:00"
    DEFAULT_CLOSE_TIME: str = "21:00"
    DEFAULT_SLOT_MINUTES: int = 30

    # 1 = bookable from tomorrow onward
    MIN_ADVANCE_DAYS: int = 1

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/errors.log"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
