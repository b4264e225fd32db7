#market_cart/data/models/sub_category.py
from sqlalchemy import Column, Integer, String

from market_cart.data.database import Base


class SubCategoryModel(Base):
    __tablename__ = "sub_categories"

    id = Column(Integer, primary_key=True)
    subcategory_name = Column(String(100), nullable=False)
