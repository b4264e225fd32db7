# market_cart/tasks/purge.py
from market_cart.celery_worker import celery_app
from market_cart.data.database import SessionLocal
from market_cart.repos.cart_repo import CartRepo
from market_cart.utils.logging import get_logger

logger = get_logger(__name__)


@celery_app.task(name="market_cart.tasks.purge.purge_purchased_entries_task")
def purge_purchased_entries_task():
    """Drop cart entries for posts the cart owner has already bought."""
    logger.info("Purge purchased cart entries task started")

    db = SessionLocal()
    try:
        deleted = CartRepo(db).delete_purchased_entries()
    finally:
        db.close()

    logger.info(f"Purged {deleted} purchased cart entries")
    return deleted
