import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from app.core.config import settings
from app.models.itinerary import Activity

logger = logging.getLogger(__name__)

DEFAULT_POOL_FILE = Path(__file__).resolve().parents[1] / "data" / "activity_pool.csv"
POOL_COLUMNS = ["name", "description", "time", "location"]


def _clean(value) -> Optional[str]:
    if pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def load_activity_pool(path: Optional[str | Path] = None) -> List[Activity]:
    """
    Read the ordered activity candidate pool from a CSV file.
    Row order is kept; rows without a name are dropped.
    Falls back to the bundled pool when no path is configured.
    """
    pool_file = Path(path or settings.ACTIVITY_POOL_FILE or DEFAULT_POOL_FILE)
    df = pd.read_csv(pool_file, dtype=str)

    missing = [col for col in POOL_COLUMNS if col not in df.columns]
    if "name" in missing:
        raise ValueError(f"Activity pool {pool_file} has no 'name' column.")
    for col in missing:
        df[col] = None

    df["name"] = df["name"].map(_clean)
    df = df[df["name"].notna()]

    pool = [
        Activity(**{col: _clean(row[col]) for col in POOL_COLUMNS})
        for row in df[POOL_COLUMNS].to_dict(orient="records")
    ]
    logger.info("Loaded %d activities from %s", len(pool), pool_file)
    return pool
