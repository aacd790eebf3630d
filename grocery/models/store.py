"""Store model."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint

from grocery.database import Base
from grocery.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Store(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A user-registered store label used to tag items."""

    __tablename__ = "stores"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_store_user_name"),)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
