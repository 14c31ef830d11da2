from fastapi import APIRouter
from app.api.v1.endpoints import bookings, trips

api_router = APIRouter()
api_router.include_router(trips.router, prefix="/trips", tags=["Trips & Planning"])
api_router.include_router(bookings.router, prefix="/bookings", tags=["Bookings & Meals"])
