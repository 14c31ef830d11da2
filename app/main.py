from fastapi import FastAPI
from app.api.healthcheck import router as health_router
from app.api.v1.api import api_router
from app.core.logging import configure_logging

configure_logging()

app = FastAPI(
    title="Trip Itinerary Planner API",
    description="Generates day-by-day trip plans and tracks restaurant bookings as meals.",
    version="1.0.0"
)

app.include_router(health_router, tags=["Health"])
# Include the v1 router
app.include_router(api_router, prefix="/api/v1")

@app.get("/", tags=["Health"])
def read_root():
    """
    Root endpoint to check if the API is running.
    """
    return {"status": "ok", "message": "Welcome to the Trip Itinerary Planner API!"}

# To run the app, in your terminal run:
# uvicorn app.main:app --reload
