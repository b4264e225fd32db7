# market_cart/repos/cart_repo.py
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from market_cart.data.models.cart_entry import CartEntryModel
from market_cart.data.models.mileage_trade import MileageTradeModel
from market_cart.data.models.post import PostModel


class DuplicateActiveEntry(Exception):
    """Active entry for (user, post) already exists (unique index hit)."""


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    #reads
    def get_post(self, post_id: int) -> PostModel | None:
        return self.db.get(PostModel, post_id)

    def get_entry(self, entry_id: int) -> CartEntryModel | None:
        return self.db.get(CartEntryModel, entry_id)

    def get_entries_with_posts(self, user_id: int) -> list[CartEntryModel]:
        #post + author + subcategory in one round trip
        stmt = (
            select(CartEntryModel)
            .options(
                joinedload(CartEntryModel.post).joinedload(PostModel.user),
                joinedload(CartEntryModel.post).joinedload(PostModel.sub_category),
            )
            .where(CartEntryModel.user_id == user_id)
            .order_by(CartEntryModel.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_active_entry(self, user_id: int, post_id: int) -> CartEntryModel | None:
        stmt = select(CartEntryModel).where(
            CartEntryModel.user_id == user_id,
            CartEntryModel.post_id == post_id,
            CartEntryModel.is_active.is_(True),
        )
        return self.db.execute(stmt).scalars().first()

    def has_trade(self, buyer_id: int, post_id: int) -> bool:
        stmt = select(MileageTradeModel.id).where(
            MileageTradeModel.buyer_id == buyer_id,
            MileageTradeModel.post_id == post_id,
        )
        return self.db.execute(stmt).first() is not None

    def active_mileage_total(self, user_id: int) -> int:
        stmt = (
            select(func.coalesce(func.sum(PostModel.post_mileage), 0))
            .select_from(CartEntryModel)
            .join(PostModel, PostModel.post_id == CartEntryModel.post_id)
            .where(
                CartEntryModel.user_id == user_id,
                CartEntryModel.is_active.is_(True),
            )
        )
        return int(self.db.execute(stmt).scalar_one())

    #writes
    def create_entry(self, entry: CartEntryModel) -> CartEntryModel:
        self.db.add(entry)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateActiveEntry()
        self.db.refresh(entry)
        return entry

    def set_active(self, entry: CartEntryModel, is_active: bool) -> CartEntryModel:
        entry.is_active = is_active
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateActiveEntry()
        self.db.refresh(entry)
        return entry

    def delete_active_entries(self, user_id: int) -> int:
        result = self.db.execute(
            delete(CartEntryModel).where(
                CartEntryModel.user_id == user_id,
                CartEntryModel.is_active.is_(True),
            )
        )
        self.db.commit()
        return result.rowcount

    def delete_all_entries(self, user_id: int) -> int:
        result = self.db.execute(
            delete(CartEntryModel).where(CartEntryModel.user_id == user_id)
        )
        self.db.commit()
        return result.rowcount

    def delete_purchased_entries(self) -> int:
        #entries whose (user, post) already has a trade with that user as buyer
        purchased = select(MileageTradeModel.id).where(
            MileageTradeModel.buyer_id == CartEntryModel.user_id,
            MileageTradeModel.post_id == CartEntryModel.post_id,
        ).correlate(CartEntryModel).exists()
        result = self.db.execute(
            delete(CartEntryModel)
            .where(purchased)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        return result.rowcount
