from fastapi import APIRouter, Depends, HTTPException

from ..errors import NotFoundError
from ..schemas import Category, CategoryCreate
from ..services import RecordStore
from .deps import get_store

router = APIRouter()


@router.get("/", response_model=list[Category])
def list_categories(store: RecordStore = Depends(get_store)):
    """Get all categories."""
    return store.categories.get_all()


@router.get("/{category_id}", response_model=Category)
def get_category(category_id: str, store: RecordStore = Depends(get_store)):
    """Get a single category by ID."""
    category = store.categories.get(category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.post("/", response_model=Category, status_code=201)
def create_category(category: CategoryCreate, store: RecordStore = Depends(get_store)):
    """Create a new category."""
    return store.categories.add(category).record


@router.put("/{category_id}", response_model=Category)
def update_category(
    category_id: str,
    category: CategoryCreate,
    store: RecordStore = Depends(get_store)
):
    """Replace a category."""
    try:
        return store.categories.update(category_id, category).record
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Category not found")


@router.delete("/{category_id}", status_code=204)
def delete_category(category_id: str, store: RecordStore = Depends(get_store)):
    """
    Delete a category.

    Expenses and budgets that reference it are kept and show up
    as "Unknown Category".
    """
    store.categories.remove(category_id)
    return None
