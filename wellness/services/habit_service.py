"""
Habit tracking service.
Handles habits and their daily logs.
"""
import logging
from datetime import date, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from wellness.exceptions import HabitNotFoundException, ValidationException
from wellness.models import Habit, HabitLog
from wellness.repositories.habit_repository import HabitRepository, HabitLogRepository
from wellness.schemas import HabitCreate, HabitUpdate
from wellness.services.date_service import DateService, DateLike
from wellness.constants import HABIT_LOG_STATUSES, HABIT_LOG_COMPLETED, STREAK_LOG_LIMIT

logger = logging.getLogger("wellness.habit")


class HabitService:
    """Service for habits and habit logs"""

    def __init__(self, db: Session):
        self.db = db
        self.habit_repo = HabitRepository()
        self.log_repo = HabitLogRepository()

    def create_habit(self, user_id: str, habit_data: HabitCreate) -> Habit:
        """Create a new habit"""
        habit = Habit(user_id=user_id, **habit_data.model_dump())
        return self.habit_repo.create(self.db, habit)

    def update_habit(self, habit_id: int, habit_data: HabitUpdate) -> Habit:
        """
        Apply the fields set on habit_data. Turning is_active off takes the
        habit out of the habit score.

        Raises:
            HabitNotFoundException: No such habit
        """
        habit = self.habit_repo.get_by_id(self.db, habit_id)
        if not habit:
            raise HabitNotFoundException(habit_id)

        for field, value in habit_data.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            setattr(habit, field, value)
        habit = self.habit_repo.update(self.db, habit)
        logger.info(f"Habit {habit_id} updated (active={habit.is_active})")
        return habit

    def delete_habit(self, habit_id: int) -> str:
        """Delete a habit and its logs, returning the owner's user id"""
        habit = self.habit_repo.get_by_id(self.db, habit_id)
        if not habit:
            raise HabitNotFoundException(habit_id)

        user_id = habit.user_id
        self.habit_repo.delete(self.db, habit)
        logger.info(f"Habit {habit_id} deleted")
        return user_id

    def log_habit(
        self,
        habit_id: int,
        status: str,
        log_date: DateLike = None,
        notes: str = ""
    ) -> HabitLog:
        """
        Record how a habit went on a day, replacing any earlier log for that day.

        Raises:
            HabitNotFoundException: No such habit
            ValidationException: Unknown status
        """
        if status not in HABIT_LOG_STATUSES:
            raise ValidationException("status", f"must be one of {', '.join(HABIT_LOG_STATUSES)}")

        habit = self.habit_repo.get_by_id(self.db, habit_id)
        if not habit:
            raise HabitNotFoundException(habit_id)

        target_date = DateService.coerce_date(log_date)
        log = self.log_repo.upsert(self.db, habit, target_date, {
            "status": status,
            "notes": notes or "",
        })
        logger.info(f"Habit {habit_id} logged {status} for {target_date}")
        return log

    def get_streak(self, habit_id: int, today: Optional[date] = None) -> int:
        """
        Count consecutive completed days ending today.

        Walks the newest logs, matching the i-th log against today minus i
        days. A completed log on its expected day extends the streak, a log
        older than its expected day ends the walk, and anything else is
        passed over.

        Raises:
            HabitNotFoundException: No such habit
        """
        habit = self.habit_repo.get_by_id(self.db, habit_id)
        if not habit:
            raise HabitNotFoundException(habit_id)

        today = today or DateService.today()
        streak = 0
        for index, log in enumerate(self.log_repo.get_recent(self.db, habit_id, STREAK_LOG_LIMIT)):
            expected = today - timedelta(days=index)
            if log.log_date == expected and log.status == HABIT_LOG_COMPLETED:
                streak += 1
            elif log.log_date < expected:
                break
        return streak
