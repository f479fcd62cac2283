"""
Activity management service.
Handles scheduling activities and recording how they went.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from wellness.exceptions import ActivityNotFoundException, ValidationException
from wellness.models import Activity
from wellness.repositories.activity_repository import ActivityRepository
from wellness.repositories.category_repository import CategoryRepository
from wellness.schemas import ActivityCreate
from wellness.constants import (
    ACTIVITY_STATUSES,
    ACTIVITY_STATUS_COMPLETED,
    ACTIVITY_STATUS_PARTIAL,
    ACTIVITY_STATUS_SCHEDULED,
    DEFAULT_PARTIAL_PERCENTAGE,
    MAX_SUB_SCORE,
)

logger = logging.getLogger("wellness.activity")


class ActivityService:
    """Service for managing activities"""

    def __init__(self, db: Session):
        self.db = db
        self.activity_repo = ActivityRepository()
        self.category_repo = CategoryRepository()

    def create_activity(self, user_id: str, activity_data: ActivityCreate) -> Activity:
        """
        Schedule a new activity.

        Raises:
            ValidationException: Unknown subcategory
        """
        if activity_data.subcategory_id is not None:
            if not self.category_repo.get_subcategory(self.db, activity_data.subcategory_id):
                raise ValidationException("subcategory_id", f"no subcategory with ID {activity_data.subcategory_id}")

        activity = Activity(
            user_id=user_id,
            status=ACTIVITY_STATUS_SCHEDULED,
            completion_percentage=0,
            **activity_data.model_dump()
        )
        return self.activity_repo.create(self.db, activity)

    def update_status(
        self,
        activity_id: int,
        status: str,
        completion_percentage: Optional[int] = None
    ) -> Activity:
        """
        Change an activity's status.

        The stored completion percentage follows the status:
        completed -> 100, partial -> given value or 50, otherwise 0.

        Raises:
            ActivityNotFoundException: No such activity
            ValidationException: Unknown status or percentage out of range
        """
        if status not in ACTIVITY_STATUSES:
            raise ValidationException("status", f"must be one of {', '.join(ACTIVITY_STATUSES)}")

        activity = self.activity_repo.get_by_id(self.db, activity_id)
        if not activity:
            raise ActivityNotFoundException(activity_id)

        if status == ACTIVITY_STATUS_COMPLETED:
            percentage = MAX_SUB_SCORE
        elif status == ACTIVITY_STATUS_PARTIAL:
            percentage = DEFAULT_PARTIAL_PERCENTAGE if completion_percentage is None else completion_percentage
            if not 0 <= percentage <= MAX_SUB_SCORE:
                raise ValidationException("completion_percentage", "must be between 0 and 100")
        else:
            percentage = 0

        activity.status = status
        activity.completion_percentage = percentage
        activity = self.activity_repo.update(self.db, activity)
        logger.info(f"Activity {activity_id} marked {status} ({percentage}%)")
        return activity
