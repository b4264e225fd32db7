# market_cart/services/cart_service.py
from typing import Any, Dict

from sqlalchemy.orm import Session

from market_cart.data.models.cart_entry import CartEntryModel
from market_cart.repos.cart_repo import CartRepo, DuplicateActiveEntry
from market_cart.utils.logging import get_logger

logger = get_logger(__name__)

MSG_DUPLICATE = "Item is already in the cart"


class CartService:
    """
    Use cases of the mileage cart.
    query (get_cart_items) only reads,
    commands (add, delete active, clear, toggle) change cart entries.

    Errors: ValueError -> rule violation, PermissionError -> not the owner,
    LookupError -> missing post/entry or nothing to delete.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)

    #query
    def get_cart_items(self, user_id: int) -> Dict[str, Any]:
        entries = self.repo.get_entries_with_posts(user_id)

        #inactive entries stay in the list but never count towards the total
        total = sum(e.post.post_mileage for e in entries if e.is_active and e.post)

        return {
            "cart_items": [self._entry_out(e) for e in entries if e.post],
            "total_mileage": total,
        }

    #commands
    def add_item(self, user_id: int, post_id: int) -> Dict[str, Any]:
        post = self.repo.get_post(post_id)

        if not post:
            raise LookupError("Post not found")

        if post.author_id == user_id:
            logger.warning(f"User {user_id} tried to add own post {post_id}")
            raise ValueError("You cannot add your own post to the cart")

        if self.repo.get_active_entry(user_id, post_id):
            raise ValueError(MSG_DUPLICATE)

        if self.repo.has_trade(user_id, post_id):
            raise ValueError("Already purchased items cannot be added to the cart")

        #unique index on active (user, post) catches a concurrent add that passed the check above
        try:
            created = self.repo.create_entry(
                CartEntryModel(
                    user_id=user_id,
                    post_id=post_id,
                    is_active=True,
                    quantity=1,
                )
            )
        except DuplicateActiveEntry:
            logger.warning(f"Concurrent add of post {post_id} for user {user_id} rejected")
            raise ValueError(MSG_DUPLICATE) from None

        logger.info(f"Added post {post_id} to cart of user {user_id} (entry {created.id})")

        return {"message": "Item added to the cart"}

    def delete_active_items(self, user_id: int) -> Dict[str, Any]:
        deleted = self.repo.delete_active_entries(user_id)

        if deleted == 0:
            raise LookupError("No active items to delete")

        logger.info(f"Deleted {deleted} active entries of user {user_id}")

        return {"message": "Active cart items deleted"}

    def clear_cart(self, user_id: int) -> Dict[str, Any]:
        deleted = self.repo.delete_all_entries(user_id)

        logger.info(f"Cleared cart of user {user_id} ({deleted} entries)")

        return {"message": "Cart cleared"}

    def toggle_active(self, item_id: int, user_id: int) -> Dict[str, Any]:
        entry = self.repo.get_entry(item_id)

        if not entry:
            raise LookupError("Cart item not found")

        if entry.user_id != user_id:
            raise PermissionError("This cart item belongs to another user")

        new_state = not entry.is_active

        try:
            self.repo.set_active(entry, new_state)
        except DuplicateActiveEntry:
            raise ValueError(MSG_DUPLICATE) from None

        #recomputed after the commit so the flip is already counted
        total = self.repo.active_mileage_total(user_id)

        logger.info(
            f"Entry {item_id} of user {user_id} is now "
            f"{'active' if new_state else 'inactive'}, total {total}"
        )

        return {
            "message": f"Cart item {'activated' if new_state else 'deactivated'}",
            "is_active": new_state,
            "total_mileage": total,
        }

    @staticmethod
    def _entry_out(entry: CartEntryModel) -> Dict[str, Any]:
        post = entry.post
        author = post.user
        return {
            "id": entry.id,
            "post_id": post.post_id,
            "title": post.title,
            "author_nickname": author.nickname if author else None,
            "author_major": author.major if author else None,
            "created_at": post.created_at,
            "sub_category": post.sub_category.subcategory_name if post.sub_category else None,
            "mileage": post.post_mileage,
            "is_active": entry.is_active,
        }
