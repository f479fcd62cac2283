"""
Goal repository - Data access layer for Goal model.
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from wellness.models import Goal


class GoalRepository:
    """Repository for Goal data access"""

    @staticmethod
    def get_by_id(db: Session, goal_id: int) -> Optional[Goal]:
        """Get goal by ID"""
        return db.query(Goal).filter(Goal.id == goal_id).first()

    @staticmethod
    def get_all_for_user(db: Session, user_id: str) -> List[Goal]:
        """Get all goals of a user regardless of age, deadline or completion"""
        return db.query(Goal).filter(Goal.user_id == user_id).order_by(Goal.id).all()

    @staticmethod
    def get_user_ids(db: Session) -> List[str]:
        """Get every user that owns at least one goal"""
        return [row[0] for row in db.query(Goal.user_id).distinct().all()]

    @staticmethod
    def create(db: Session, goal: Goal) -> Goal:
        """Create new goal"""
        db.add(goal)
        db.commit()
        db.refresh(goal)
        return goal

    @staticmethod
    def update(db: Session, goal: Goal) -> Goal:
        """Update existing goal"""
        db.commit()
        db.refresh(goal)
        return goal

    @staticmethod
    def delete(db: Session, goal: Goal) -> None:
        """Delete a goal"""
        db.delete(goal)
        db.commit()

    @staticmethod
    def count_open(db: Session, user_id: str) -> int:
        """Count a user's goals that have not reached their target"""
        return db.query(Goal).filter(
            Goal.user_id == user_id,
            Goal.is_completed == False
        ).count()
