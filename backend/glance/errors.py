"""Domain errors raised by the record store and date parsing."""


class GlanceError(Exception):
    """Base class for application errors."""


class NotFoundError(GlanceError, LookupError):
    """Raised when an update references a record id that does not exist."""

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} with id {record_id} not found")


class InvalidArgumentError(GlanceError, ValueError):
    """Raised for malformed dates and values rejected at the write boundary."""


class DuplicateBudgetError(InvalidArgumentError):
    """Raised when a budget already exists for the same category and period."""

    def __init__(self, category_id: str, period: str):
        self.category_id = category_id
        self.period = period
        super().__init__(
            f"A {period} budget already exists for category {category_id}"
        )
