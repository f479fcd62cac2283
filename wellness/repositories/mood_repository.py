"""
Mood log repository - Data access layer for MoodLog model.
"""
from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session

from wellness.models import MoodLog
from wellness.repositories.upsert import upsert_row


class MoodLogRepository:
    """Repository for MoodLog data access"""

    @staticmethod
    def get_by_date(db: Session, user_id: str, log_date: date) -> Optional[MoodLog]:
        """Get the mood log for a user on an exact date"""
        return db.query(MoodLog).filter(
            MoodLog.user_id == user_id,
            MoodLog.log_date == log_date
        ).first()

    @staticmethod
    def get_user_ids(db: Session) -> List[str]:
        """Get every user that logged at least one mood"""
        return [row[0] for row in db.query(MoodLog.user_id).distinct().all()]

    @staticmethod
    def upsert(db: Session, user_id: str, log_date: date, values: dict) -> MoodLog:
        """Create or overwrite the single mood log for (user_id, log_date)"""
        return upsert_row(
            db, MoodLog,
            {"user_id": user_id, "log_date": log_date},
            values
        )
