"""
Activity catalog service.
Categories and subcategories users pick from when planning an activity.
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from wellness.models import Category, Subcategory
from wellness.repositories.category_repository import CategoryRepository

logger = logging.getLogger("wellness.catalog")

# (name, icon, [(subcategory, icon, suggested minutes), ...])
DEFAULT_CATALOG = [
    ("Fitness", "💪", [("Running", "🏃", 30), ("Yoga", "🧘", 45), ("Strength", "🏋️", 40)]),
    ("Reading", "📚", [("Fiction", "📖", 30), ("Learning", "🎓", 45)]),
    ("Cooking", "🍳", [("New recipe", "🥗", 60), ("Baking", "🧁", 90)]),
    ("Travel", "✈️", [("Day trip", "🗺️", 240), ("City walk", "🚶", 60)]),
    ("Music", "🎵", [("Practice", "🎸", 30), ("Listening", "🎧", 20)]),
    ("Nature", "🌿", [("Hiking", "🥾", 120), ("Gardening", "🌱", 45)]),
]


class CatalogService:
    """Service for the activity catalog"""

    def __init__(self, db: Session):
        self.db = db
        self.category_repo = CategoryRepository()

    def list_categories(self) -> List[Category]:
        return self.category_repo.get_all(self.db)

    def list_subcategories(self, category_id: int) -> List[Subcategory]:
        """Subcategories of a category, empty for an unknown category"""
        return self.category_repo.get_subcategories(self.db, category_id)

    def seed_defaults(self) -> int:
        """
        Insert the default catalog into an empty categories table.

        Returns:
            Number of categories created (0 when the catalog already exists)
        """
        if self.category_repo.count(self.db) > 0:
            return 0

        for sort_order, (name, icon, subcategories) in enumerate(DEFAULT_CATALOG):
            category = Category(name=name, icon=icon, sort_order=sort_order)
            category.subcategories = [
                Subcategory(name=sub_name, icon=sub_icon, suggested_duration=minutes, sort_order=index)
                for index, (sub_name, sub_icon, minutes) in enumerate(subcategories)
            ]
            self.category_repo.create(self.db, category)

        logger.info(f"Seeded {len(DEFAULT_CATALOG)} activity categories")
        return len(DEFAULT_CATALOG)
