#import all models so SQLAlchemy registers them in Base.metadata

from market_cart.data.models.user import UserModel
from market_cart.data.models.sub_category import SubCategoryModel
from market_cart.data.models.post import PostModel
from market_cart.data.models.cart_entry import CartEntryModel
from market_cart.data.models.mileage_trade import MileageTradeModel

__all__ = [
    "UserModel",
    "SubCategoryModel",
    "PostModel",
    "CartEntryModel",
    "MileageTradeModel",
]
