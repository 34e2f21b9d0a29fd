from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class KeyValueEntry(Base, TimestampMixin):
    """
    A single key in the local key-value store.

    Values are JSON documents stored as text. Each record collection
    (expenses, budgets, categories) lives under its own key as one array.
    """

    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<KeyValueEntry(key='{self.key}', size={len(self.value)})>"
