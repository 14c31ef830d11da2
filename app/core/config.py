import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    # "memory" keeps trips in-process, "supabase" stores them in SUPABASE_TRIPS_TABLE
    TRIP_STORE: str = os.getenv("TRIP_STORE", "memory").lower()

    SUPABASE_URL: str = os.getenv("SUPABASE_URL")
    SUPABASE_KEY: str = os.getenv("SUPABASE_KEY")
    SUPABASE_TRIPS_TABLE: str = os.getenv("SUPABASE_TRIPS_TABLE", "trips")

    # CSV with name,description,time,location columns. Unset -> built-in pool
    ACTIVITY_POOL_FILE: str | None = os.getenv("ACTIVITY_POOL_FILE") or None

    ROTATION_WINDOW: int = int(os.getenv("ROTATION_WINDOW", "3"))
    MAX_TRIP_DAYS: int = int(os.getenv("MAX_TRIP_DAYS", "30"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
