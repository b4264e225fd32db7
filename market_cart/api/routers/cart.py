# market_cart/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from market_cart.data.database import get_db
from market_cart.domain.schemas import CartOut, MessageOut, ToggleOut
from market_cart.services.cart_service import CartService
from market_cart.utils.ids import parse_id

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


def to_http_error(e: Exception) -> HTTPException:
    if isinstance(e, PermissionError):
        return HTTPException(status_code=403, detail=str(e))
    if isinstance(e, LookupError):
        return HTTPException(status_code=404, detail=str(e))
    return HTTPException(status_code=400, detail=str(e))


#ids stay plain strings here, non-numeric values have to give 400 and not 422
@router.get("", response_model=CartOut)
def get_cart_items(
    user_id: str | None = Query(None, alias="userId"),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.get_cart_items(parse_id(user_id, "userId"))
    except ValueError as e:
        raise to_http_error(e)


@router.post("", response_model=MessageOut, status_code=201)
def add_cart_item(
    user_id: str | None = Query(None, alias="userId"),
    post_id: str | None = Query(None, alias="postId"),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.add_item(
            user_id=parse_id(user_id, "userId"),
            post_id=parse_id(post_id, "postId"),
        )
    except (ValueError, LookupError) as e:
        raise to_http_error(e)


@router.delete("/active", response_model=MessageOut)
def delete_active_cart_items(
    user_id: str | None = Query(None, alias="userId"),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.delete_active_items(parse_id(user_id, "userId"))
    except (ValueError, LookupError) as e:
        raise to_http_error(e)


@router.delete("", response_model=MessageOut)
def clear_cart(
    user_id: str | None = Query(None, alias="userId"),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.clear_cart(parse_id(user_id, "userId"))
    except ValueError as e:
        raise to_http_error(e)


@router.patch("/toggle", response_model=ToggleOut)
def toggle_cart_item_active(
    item_id: str | None = Query(None, alias="itemId"),
    user_id: str | None = Query(None, alias="userId"),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.toggle_active(
            item_id=parse_id(item_id, "itemId"),
            user_id=parse_id(user_id, "userId"),
        )
    except (ValueError, PermissionError, LookupError) as e:
        raise to_http_error(e)
