"""
Happiness score repository - Data access layer for HappinessScore model.
"""
from datetime import date, timedelta
from typing import List, Optional
from sqlalchemy.orm import Session

from wellness.models import HappinessScore
from wellness.repositories.upsert import upsert_row


class HappinessScoreRepository:
    """Repository for HappinessScore data access"""

    @staticmethod
    def get_by_date(db: Session, user_id: str, score_date: date) -> Optional[HappinessScore]:
        """Get a user's stored score for a specific date"""
        return db.query(HappinessScore).filter(
            HappinessScore.user_id == user_id,
            HappinessScore.score_date == score_date
        ).first()

    @staticmethod
    def get_since(db: Session, user_id: str, start_date: date) -> List[HappinessScore]:
        """Get a user's stored scores on or after start_date, newest first"""
        return db.query(HappinessScore).filter(
            HappinessScore.user_id == user_id,
            HappinessScore.score_date >= start_date
        ).order_by(HappinessScore.score_date.desc()).all()

    @staticmethod
    def get_history(db: Session, user_id: str, days: int, from_date: date) -> List[HappinessScore]:
        """Get a user's stored scores for the last N days from specified date"""
        start_date = from_date - timedelta(days=days)
        return db.query(HappinessScore).filter(
            HappinessScore.user_id == user_id,
            HappinessScore.score_date >= start_date,
            HappinessScore.score_date <= from_date
        ).order_by(HappinessScore.score_date.desc()).all()

    @staticmethod
    def upsert(db: Session, user_id: str, score_date: date, scores: dict) -> HappinessScore:
        """Create or overwrite the score row for (user_id, score_date)"""
        return upsert_row(
            db, HappinessScore,
            {"user_id": user_id, "score_date": score_date},
            scores
        )
