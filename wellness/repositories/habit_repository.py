"""
Habit repository - Data access layer for Habit and HabitLog models.
"""
from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session

from wellness.models import Habit, HabitLog
from wellness.constants import HABIT_WINDOW_SIZE
from wellness.repositories.upsert import upsert_row


class HabitRepository:
    """Repository for Habit data access"""

    @staticmethod
    def get_by_id(db: Session, habit_id: int) -> Optional[Habit]:
        """Get habit by ID"""
        return db.query(Habit).filter(Habit.id == habit_id).first()

    @staticmethod
    def get_active_for_user(db: Session, user_id: str) -> List[Habit]:
        """Get a user's active habits"""
        return db.query(Habit).filter(
            Habit.user_id == user_id,
            Habit.is_active == True
        ).order_by(Habit.id).all()

    @staticmethod
    def get_user_ids(db: Session) -> List[str]:
        """Get every user that owns at least one habit"""
        return [row[0] for row in db.query(Habit.user_id).distinct().all()]

    @staticmethod
    def create(db: Session, habit: Habit) -> Habit:
        """Create new habit"""
        db.add(habit)
        db.commit()
        db.refresh(habit)
        return habit

    @staticmethod
    def update(db: Session, habit: Habit) -> Habit:
        """Update existing habit"""
        db.commit()
        db.refresh(habit)
        return habit

    @staticmethod
    def delete(db: Session, habit: Habit) -> None:
        """Delete a habit together with its logs"""
        db.delete(habit)
        db.commit()


class HabitLogRepository:
    """Repository for HabitLog data access"""

    @staticmethod
    def get_recent(db: Session, habit_id: int, limit: int = HABIT_WINDOW_SIZE) -> List[HabitLog]:
        """Get a habit's newest logs by log_date, newest first"""
        return db.query(HabitLog).filter(
            HabitLog.habit_id == habit_id
        ).order_by(HabitLog.log_date.desc()).limit(limit).all()

    @staticmethod
    def upsert(db: Session, habit: Habit, log_date: date, values: dict) -> HabitLog:
        """Create or overwrite the log for (habit, log_date)"""
        return upsert_row(
            db, HabitLog,
            {"habit_id": habit.id, "log_date": log_date},
            {"user_id": habit.user_id, **values}
        )
