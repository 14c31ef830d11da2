# app/core/exceptions.py


class InvalidRangeError(ValueError):
    """Raised when a trip's end date precedes its start date."""

    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"End date {end} is before start date {start}.")


class TripTooLongError(ValueError):
    def __init__(self, num_days: int, max_days: int):
        self.num_days = num_days
        self.max_days = max_days
        super().__init__(f"Trip spans {num_days} days; at most {max_days} days can be generated.")


class TripNotFoundError(LookupError):
    def __init__(self, trip_id: str):
        self.trip_id = trip_id
        super().__init__(f"Trip '{trip_id}' not found.")
