# market_cart/data/seed.py
from market_cart.data.database import SessionLocal
from market_cart.data.models import UserModel, SubCategoryModel, PostModel
from market_cart.main import init_db


def seed():
    init_db()
    db = SessionLocal()
    try:
        # not forcing: only seed if empty
        if db.query(UserModel).first():
            return
        db.add_all([
            UserModel(id=1, nickname="minji", major="Computer Science"),
            UserModel(id=2, nickname="doyun", major="Business"),
            SubCategoryModel(id=1, subcategory_name="Lecture notes"),
        ])
        db.flush()
        db.add_all([
            PostModel(post_id=10, author_id=2, sub_category_id=1, title="Algorithms midterm summary", post_mileage=50),
            PostModel(post_id=11, author_id=2, sub_category_id=1, title="Accounting 101 notes", post_mileage=30),
            PostModel(post_id=12, author_id=1, sub_category_id=1, title="Operating systems cheat sheet", post_mileage=20),
        ])
        db.commit()
    finally:
        db.close()


if __name__ == "__main__":
    seed()
