"""
Happiness score service.
Computes the daily happiness score from activity, mood, goal and habit logs.

Score = round(Activity × 0.3 + Mood × 0.3 + Goal × 0.2 + Habit × 0.2)

Each sub-score is an integer 0-100. Rounding is half-up throughout so that
scores match the ones the mobile client produced before this service existed.
"""
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, asdict
from datetime import date, datetime
from typing import Callable, Iterable, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wellness.database import SessionLocal
from wellness.exceptions import DataAccessException
from wellness.models import Activity, Goal, HabitLog, MoodLog
from wellness.repositories.activity_repository import ActivityRepository
from wellness.repositories.goal_repository import GoalRepository
from wellness.repositories.habit_repository import HabitRepository, HabitLogRepository
from wellness.repositories.happiness_repository import HappinessScoreRepository
from wellness.repositories.mood_repository import MoodLogRepository
from wellness.services.date_service import DateService, DateLike
from wellness.constants import (
    ACTIVITY_STATUS_COMPLETED,
    ACTIVITY_STATUS_PARTIAL,
    ACTIVITY_STATUS_MISSED,
    ACTIVITY_STATUS_SCHEDULED,
    HABIT_LOG_COMPLETED,
    HABIT_LOG_PARTIAL,
    HABIT_LOG_STATUSES,
    HABIT_PARTIAL_CREDIT,
    HABIT_WINDOW_SIZE,
    MAX_SUB_SCORE,
    MOOD_SCALE_MAX,
    WEIGHT_ACTIVITY,
    WEIGHT_MOOD,
    WEIGHT_GOAL,
    WEIGHT_HABIT,
)

logger = logging.getLogger("wellness.happiness")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity (2.5 -> 3, -2.5 -> -2)"""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class ScoreBreakdown:
    """The four sub-scores and their weighted combination"""
    activity_score: int
    mood_score: int
    goal_score: int
    habit_score: int
    overall_score: int

    def as_dict(self) -> dict:
        return asdict(self)


def activity_contribution(activity: Activity) -> float:
    """
    Per-activity completion used by the activity score.

    completed -> 100, partial -> stored completion_percentage,
    missed / scheduled -> 0.

    Raises:
        DataAccessException: Unknown status, or partial without a percentage
    """
    status = activity.status
    if status == ACTIVITY_STATUS_COMPLETED:
        return MAX_SUB_SCORE
    if status == ACTIVITY_STATUS_PARTIAL:
        if activity.completion_percentage is None:
            raise DataAccessException(
                "activity read",
                f"partial activity {activity.id} has no completion_percentage"
            )
        return activity.completion_percentage
    if status in (ACTIVITY_STATUS_MISSED, ACTIVITY_STATUS_SCHEDULED):
        return 0
    raise DataAccessException("activity read", f"activity {activity.id} has unknown status {status!r}")


def calculate_activity_score(activities: Sequence[Activity]) -> int:
    """Mean completion of the day's activities, capped at 100. No activities -> 0."""
    if not activities:
        return 0

    total = sum(activity_contribution(activity) for activity in activities)
    return min(round_half_up(total / len(activities)), MAX_SUB_SCORE)


def calculate_mood_score(mood_log: Optional[MoodLog]) -> int:
    """Linear rescale of the 0-10 mood to 0-100. No log -> 0."""
    if mood_log is None:
        return 0

    if mood_log.mood_score is None:
        raise DataAccessException("mood read", f"mood log {mood_log.id} has no mood_score")

    return round_half_up(mood_log.mood_score / MOOD_SCALE_MAX * 100)


def calculate_goal_score(goals: Sequence[Goal]) -> int:
    """
    Mean progress over all of a user's goals.

    Each goal with a positive target contributes min(current / target × 100, 100).
    Goals without a positive target contribute 0 but still count towards the
    number of goals averaged over.
    """
    if not goals:
        return 0

    total_progress = 0.0
    for goal in goals:
        if goal.target_value is None or goal.current_value is None:
            raise DataAccessException("goal read", f"goal {goal.id} is missing target or current value")
        if goal.target_value <= 0:
            continue
        total_progress += min(goal.current_value / goal.target_value * 100, MAX_SUB_SCORE)

    return round_half_up(total_progress / len(goals))


def calculate_habit_log_score(logs: Sequence[HabitLog]) -> int:
    """
    Consistency of one habit over its logged days.

    completed counts fully, partial counts half, missed counts zero,
    averaged over the number of logs supplied.
    """
    completed_count = 0
    partial_count = 0
    for log in logs:
        if log.status not in HABIT_LOG_STATUSES:
            raise DataAccessException("habit log read", f"habit log {log.id} has unknown status {log.status!r}")
        if log.status == HABIT_LOG_COMPLETED:
            completed_count += 1
        elif log.status == HABIT_LOG_PARTIAL:
            partial_count += 1

    return round_half_up(
        ((completed_count * 100) + (partial_count * HABIT_PARTIAL_CREDIT)) / (len(logs) * 100) * 100
    )


def calculate_habit_score(logs_per_habit: Iterable[Sequence[HabitLog]]) -> int:
    """Mean per-habit score over habits with at least one log. None logged -> 0."""
    habit_scores = [calculate_habit_log_score(logs) for logs in logs_per_habit if logs]
    if not habit_scores:
        return 0

    return round_half_up(sum(habit_scores) / len(habit_scores))


def combine_scores(activity_score: int, mood_score: int, goal_score: int, habit_score: int) -> int:
    """Weighted overall score"""
    return round_half_up(
        activity_score * WEIGHT_ACTIVITY
        + mood_score * WEIGHT_MOOD
        + goal_score * WEIGHT_GOAL
        + habit_score * WEIGHT_HABIT
    )


class HappinessScoreEngine:
    """
    Computes and persists a user's daily happiness score.

    Stateless between calls. The four sub-scores are fetched concurrently,
    each on its own session; any fetch failure aborts the computation before
    anything is written.
    """

    FETCH_WORKERS = 4

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal):
        self.session_factory = session_factory
        self.activity_repo = ActivityRepository()
        self.mood_repo = MoodLogRepository()
        self.goal_repo = GoalRepository()
        self.habit_repo = HabitRepository()
        self.habit_log_repo = HabitLogRepository()
        self.score_repo = HappinessScoreRepository()

    def compute_daily_score(self, user_id: str, score_date: DateLike = None) -> int:
        """
        Compute, persist and return the overall score for a user and day.

        Args:
            user_id: Owner of the logs. Unknown users score 0 everywhere.
            score_date: Calendar day, defaults to today

        Returns:
            Overall score 0-100

        Raises:
            InvalidDateException: score_date is malformed (no query is issued)
            DataAccessException: Any store call failed or returned a malformed row
        """
        return self.compute_breakdown(user_id, score_date).overall_score

    def compute_breakdown(self, user_id: str, score_date: DateLike = None) -> ScoreBreakdown:
        """Same as compute_daily_score, returning all sub-scores"""
        target_date = DateService.coerce_date(score_date)
        day_start, day_end = DateService.get_day_range(target_date)

        with ThreadPoolExecutor(
            max_workers=self.FETCH_WORKERS,
            thread_name_prefix="happiness-fetch"
        ) as pool:
            activity_future = pool.submit(
                self._with_session, "activity fetch",
                self._activity_score, user_id, day_start, day_end
            )
            mood_future = pool.submit(
                self._with_session, "mood fetch",
                self._mood_score, user_id, target_date
            )
            goal_future = pool.submit(
                self._with_session, "goal fetch",
                self._goal_score, user_id
            )
            habit_future = pool.submit(
                self._with_session, "habit fetch",
                self._habit_score, user_id
            )

            activity_score = activity_future.result()
            mood_score = mood_future.result()
            goal_score = goal_future.result()
            habit_score = habit_future.result()

        breakdown = ScoreBreakdown(
            activity_score=activity_score,
            mood_score=mood_score,
            goal_score=goal_score,
            habit_score=habit_score,
            overall_score=combine_scores(activity_score, mood_score, goal_score, habit_score),
        )

        self._with_session("score upsert", self._persist, user_id, target_date, breakdown)

        logger.info(
            f"Happiness score for user={user_id} date={target_date}: "
            f"overall={breakdown.overall_score} activity={activity_score} "
            f"mood={mood_score} goal={goal_score} habit={habit_score}"
        )
        return breakdown

    def _with_session(self, operation: str, func, *args):
        """Run func(db, *args) on a fresh session, translating database errors"""
        db = self.session_factory()
        try:
            return func(db, *args)
        except SQLAlchemyError as e:
            logger.error(f"Happiness {operation} failed: {e}")
            raise DataAccessException(operation, str(e)) from e
        finally:
            db.close()

    def _activity_score(self, db: Session, user_id: str, day_start: datetime, day_end: datetime) -> int:
        activities = self.activity_repo.get_in_range(db, user_id, day_start, day_end)
        return calculate_activity_score(activities)

    def _mood_score(self, db: Session, user_id: str, target_date: date) -> int:
        return calculate_mood_score(self.mood_repo.get_by_date(db, user_id, target_date))

    def _goal_score(self, db: Session, user_id: str) -> int:
        return calculate_goal_score(self.goal_repo.get_all_for_user(db, user_id))

    def _habit_score(self, db: Session, user_id: str) -> int:
        habits = self.habit_repo.get_active_for_user(db, user_id)
        if not habits:
            return 0

        logs_per_habit: List[List[HabitLog]] = [
            self.habit_log_repo.get_recent(db, habit.id, HABIT_WINDOW_SIZE)
            for habit in habits
        ]
        return calculate_habit_score(logs_per_habit)

    def _persist(self, db: Session, user_id: str, target_date: date, breakdown: ScoreBreakdown) -> None:
        self.score_repo.upsert(db, user_id, target_date, breakdown.as_dict())
