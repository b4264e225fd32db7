#market_cart/data/models/cart_entry.py
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, text
from sqlalchemy.orm import relationship

from market_cart.data.database import Base


class CartEntryModel(Base):
    __tablename__ = "cart"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    post_id = Column(Integer, ForeignKey("posts.post_id"), nullable=False)

    is_active = Column(Boolean, nullable=False, default=True)
    quantity = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    post = relationship("PostModel")

    #at most one active entry per (user, post), inactive ones may repeat
    __table_args__ = (
        Index(
            "uq_cart_active_user_post",
            "user_id",
            "post_id",
            unique=True,
            postgresql_where=text("is_active"),
            sqlite_where=text("is_active"),
        ),
    )
