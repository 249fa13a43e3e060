import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import settings
from .network import get_local_ip
from .routers import crud_router, login_router
from .storage import open_storage

logger = logging.getLogger("trip_booking")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Opens the database once for the whole process and closes it on shutdown.
    """
    storage = open_storage(settings)
    app.state.storage = storage

    logger.info(f"Trip booking API listening at http://{get_local_ip()}:{settings.PORT}")

    yield

    logger.info("Trip booking API shutting down...")
    storage.close()


app = FastAPI(
    title="Trip Booking API",
    description="CRUD API for destinations, trips, customers, meetings and bookings.",
    version="1.0.0",
    lifespan=lifespan
)

# Login goes first so /customers/login is never read as a customer id.
app.include_router(login_router.router)
app.include_router(crud_router.destination_router)
app.include_router(crud_router.trip_router)
app.include_router(crud_router.customer_router)
app.include_router(crud_router.meeting_router)
app.include_router(crud_router.booking_router)


@app.get("/")
def read_root():
    return {"message": "Welcome to the Trip Booking API"}
