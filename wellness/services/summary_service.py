"""
Score summary service.
Today's happiness score, weekly and monthly averages of stored scores,
the score level and dashboard counts.
"""
from datetime import date, timedelta
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from wellness.models import HappinessScore
from wellness.repositories.activity_repository import ActivityRepository
from wellness.repositories.goal_repository import GoalRepository
from wellness.repositories.habit_repository import HabitRepository
from wellness.repositories.happiness_repository import HappinessScoreRepository
from wellness.services.date_service import DateService
from wellness.services.happiness_service import HappinessScoreEngine, round_half_up
from wellness.constants import WEEKLY_WINDOW_DAYS, SCORE_LEVELS, ACTIVITY_STATUS_COMPLETED


def average_overall(scores: Sequence[HappinessScore]) -> Optional[int]:
    """Rounded mean overall score, None when there are no scores"""
    if not scores:
        return None
    return round_half_up(sum(s.overall_score for s in scores) / len(scores))


def score_level(score: int) -> dict:
    """Level band for an overall score"""
    for minimum, name, icon, description in SCORE_LEVELS:
        if score >= minimum:
            break
    return {"name": name, "icon": icon, "description": description}


class SummaryService:
    """Service for reading stored happiness scores"""

    def __init__(self, db: Session, engine: HappinessScoreEngine):
        self.db = db
        self.engine = engine
        self.score_repo = HappinessScoreRepository()
        self.activity_repo = ActivityRepository()
        self.goal_repo = GoalRepository()
        self.habit_repo = HabitRepository()

    def get_today_score(self, user_id: str, today: Optional[date] = None) -> int:
        """Stored overall score for today, computed and persisted when missing"""
        today = today or DateService.today()
        stored = self.score_repo.get_by_date(self.db, user_id, today)
        if stored is not None:
            return stored.overall_score
        return self.engine.compute_daily_score(user_id, today)

    def get_summary(self, user_id: str, today: Optional[date] = None) -> dict:
        """
        Dashboard bundle for a user.

        Returns:
            Dictionary with today_score, weekly_average, monthly_average,
            level, completed_today, active_goals and active_habits.
            Averages are None when no scores were stored in the period.
        """
        today = today or DateService.today()
        today_score = self.get_today_score(user_id, today)

        # The engine wrote on its own session
        self.db.expire_all()

        week_start = today - timedelta(days=WEEKLY_WINDOW_DAYS)
        month_start = DateService.subtract_month(today)

        return {
            "today_score": today_score,
            "weekly_average": average_overall(self.score_repo.get_since(self.db, user_id, week_start)),
            "monthly_average": average_overall(self.score_repo.get_since(self.db, user_id, month_start)),
            "level": score_level(today_score),
            **self.get_stats(user_id, today),
        }

    def get_stats(self, user_id: str, today: date) -> dict:
        """Completed activities today, open goals and active habits"""
        day_start, day_end = DateService.get_day_range(today)
        activities = self.activity_repo.get_in_range(self.db, user_id, day_start, day_end)
        return {
            "completed_today": sum(1 for a in activities if a.status == ACTIVITY_STATUS_COMPLETED),
            "active_goals": self.goal_repo.count_open(self.db, user_id),
            "active_habits": len(self.habit_repo.get_active_for_user(self.db, user_id)),
        }

    def get_history(self, user_id: str, days: int = 30, today: Optional[date] = None) -> List[HappinessScore]:
        """Stored scores for the last N days, newest first"""
        today = today or DateService.today()
        return self.score_repo.get_history(self.db, user_id, days, today)
