from .base import Base, TimestampMixin
from .kv_entry import KeyValueEntry

__all__ = [
    "Base",
    "TimestampMixin",
    "KeyValueEntry",
]
