#market_cart/data/models/post.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, ForeignKey, String, DateTime
from sqlalchemy.orm import relationship

from market_cart.data.database import Base


class PostModel(Base):
    """Read-only here, posts are written by the posting subsystem."""

    __tablename__ = "posts"

    post_id = Column(Integer, primary_key=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    sub_category_id = Column(Integer, ForeignKey("sub_categories.id"), nullable=False)

    title = Column(String(200), nullable=False)
    post_mileage = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    user = relationship("UserModel")
    sub_category = relationship("SubCategoryModel")
