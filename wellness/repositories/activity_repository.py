"""
Activity repository - Data access layer for Activity model.
"""
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import and_

from wellness.models import Activity


class ActivityRepository:
    """Repository for Activity data access"""

    @staticmethod
    def get_by_id(db: Session, activity_id: int) -> Optional[Activity]:
        """Get activity by ID"""
        return db.query(Activity).filter(Activity.id == activity_id).first()

    @staticmethod
    def get_in_range(
        db: Session,
        user_id: str,
        start: datetime,
        end: datetime
    ) -> List[Activity]:
        """Get a user's activities scheduled in [start, end)"""
        return db.query(Activity).filter(
            and_(
                Activity.user_id == user_id,
                Activity.scheduled_start >= start,
                Activity.scheduled_start < end
            )
        ).order_by(Activity.scheduled_start).all()

    @staticmethod
    def get_user_ids(db: Session) -> List[str]:
        """Get every user that owns at least one activity"""
        return [row[0] for row in db.query(Activity.user_id).distinct().all()]

    @staticmethod
    def create(db: Session, activity: Activity) -> Activity:
        """Create new activity"""
        db.add(activity)
        db.commit()
        db.refresh(activity)
        return activity

    @staticmethod
    def update(db: Session, activity: Activity) -> Activity:
        """Update existing activity"""
        db.commit()
        db.refresh(activity)
        return activity
