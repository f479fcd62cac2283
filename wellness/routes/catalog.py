"""
Activity catalog HTTP routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from wellness.auth import verify_api_key
from wellness.database import get_db
from wellness.schemas import CategoryResponse, SubcategoryResponse
from wellness.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/categories", tags=["catalog"], dependencies=[Depends(verify_api_key)])


@router.get("", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    """Activity categories in display order."""
    return CatalogService(db).list_categories()


@router.get("/{category_id}/subcategories", response_model=List[SubcategoryResponse])
def list_subcategories(category_id: int, db: Session = Depends(get_db)):
    """Subcategories of a category with their suggested durations."""
    return CatalogService(db).list_subcategories(category_id)
