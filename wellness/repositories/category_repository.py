"""
Category repository - Data access layer for the activity catalog.
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from wellness.models import Category, Subcategory


class CategoryRepository:
    """Repository for Category and Subcategory data access"""

    @staticmethod
    def get_all(db: Session) -> List[Category]:
        """Get all categories in display order"""
        return db.query(Category).order_by(Category.sort_order, Category.id).all()

    @staticmethod
    def get_by_id(db: Session, category_id: int) -> Optional[Category]:
        """Get category by ID"""
        return db.query(Category).filter(Category.id == category_id).first()

    @staticmethod
    def get_subcategories(db: Session, category_id: int) -> List[Subcategory]:
        """Get a category's subcategories in display order"""
        return db.query(Subcategory).filter(
            Subcategory.category_id == category_id
        ).order_by(Subcategory.sort_order, Subcategory.id).all()

    @staticmethod
    def get_subcategory(db: Session, subcategory_id: int) -> Optional[Subcategory]:
        """Get subcategory by ID"""
        return db.query(Subcategory).filter(Subcategory.id == subcategory_id).first()

    @staticmethod
    def count(db: Session) -> int:
        return db.query(Category).count()

    @staticmethod
    def create(db: Session, category: Category) -> Category:
        """Create a category with any attached subcategories"""
        db.add(category)
        db.commit()
        db.refresh(category)
        return category
