# market_cart/celery_worker.py
from celery import Celery

from market_cart.utils.settings import CELERY_BROKER_URL, CELERY_RESULT_BACKEND, PURGE_INTERVAL_SECONDS

celery_app = Celery(
    "market_cart",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

#tasks have to be imported explicitly so the worker registers them
celery_app.conf.imports = (
    "market_cart.tasks.purge",
)

celery_app.conf.beat_schedule = {
    "purge-purchased-cart-entries": {
        "task": "market_cart.tasks.purge.purge_purchased_entries_task",
        "schedule": float(PURGE_INTERVAL_SECONDS),
    },
}

celery_app.conf.timezone = "UTC"
