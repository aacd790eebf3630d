"""Grocery item model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String

from grocery.database import Base
from grocery.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class GroceryItem(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """An entry on a user's grocery list."""

    __tablename__ = "grocery_items"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(500), nullable=False)
    # Comma-joined store tags: "Costco, H mart"
    supermarket = Column(String(500), nullable=True, default="General")
    completed = Column(Boolean, nullable=False, default=False, index=True)
