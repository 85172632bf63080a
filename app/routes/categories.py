# app/routes/categories.py
"""
Category routes - per-user income and expense categories.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.auth.auth import get_current_user
from app.core.finance import initialize_default_categories
from app.core.models import CategoryCreate, CategoryOut, TransactionType
from app.core.request_logging import log_security_event
from app.core.validators import validate_not_blank
from app.database.database import Category, User, get_db

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryOut])
async def list_categories(
    type: TransactionType | None = Query(None),
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Current user's categories, optionally filtered by type."""
    query = session.query(Category).filter(Category.user_id == current_user.id)
    if type is not None:
        query = query.filter(Category.type == type)
    return query.order_by(Category.id).all()


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
async def add_category(
    payload: CategoryCreate,
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Add a category; the same name and type twice is rejected with 409."""
    name = validate_not_blank(payload.name, "name")

    existing = (
        session.query(Category)
        .filter(Category.user_id == current_user.id, Category.name == name, Category.type == payload.type)
        .first()
    )
    if existing:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Category already exists")

    category = Category(user_id=current_user.id, name=name, type=payload.type, color=payload.color)
    session.add(category)
    session.commit()
    session.refresh(category)
    return category


@router.post("/defaults")
async def create_default_categories(
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Seed the default categories once; no-op when the user already has any."""
    created = initialize_default_categories(session, current_user.id)
    return {"created": created}


@router.delete("/{category_id}")
async def delete_category(
    category_id: int,
    session: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    category = session.get(Category, category_id)

    if not category or category.user_id != current_user.id:
        if category:
            log_security_event(
                "foreign_record_access",
                {"record": "category", "record_id": category_id, "user_id": current_user.id},
            )
        raise HTTPException(status_code=404, detail="Category not found or unauthorized")

    session.delete(category)
    session.commit()
    return {"status": "deleted", "id": category_id}
