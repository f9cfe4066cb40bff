from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cinema_booking.api.v1.bookings import router as bookings_router
from cinema_booking.api.v1.branches import router as branches_router
from cinema_booking.core.config import settings
from cinema_booking.core.logging import configure_logging

configure_logging()

app = FastAPI(title="Cinema Booking API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(branches_router, prefix=settings.API_PREFIX, tags=["branches"])
app.include_router(bookings_router, prefix=settings.API_PREFIX, tags=["bookings"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
