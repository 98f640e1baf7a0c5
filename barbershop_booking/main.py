# barbershop_booking/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from barbershop_booking.config import settings
from barbershop_booking.db import create_db_and_tables
from barbershop_booking.logger import setup_logging, logger
from barbershop_booking.routers import auth_routes, barbershops_routes, bookings_routes, users_routes

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")
    create_db_and_tables()
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal Server Error"},
    )


app.include_router(auth_routes.router)
app.include_router(users_routes.router)
app.include_router(barbershops_routes.router)
app.include_router(bookings_routes.router)


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("barbershop_booking.main:app", host="0.0.0.0", port=settings.PORT, reload=True)
