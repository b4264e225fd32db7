#market_cart/data/models/user.py
from sqlalchemy import Column, Integer, String

from market_cart.data.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    nickname = Column(String(50), nullable=False)
    major = Column(String(100), nullable=True)
