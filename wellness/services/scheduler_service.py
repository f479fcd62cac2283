"""
Background scheduler for daily score maintenance.
Handles:
- Recomputing every user's happiness score once per day
"""

import asyncio
import logging
from datetime import date
from typing import Callable, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger
from sqlalchemy.orm import Session

from wellness.database import SessionLocal
from wellness.exceptions import WellnessException
from wellness.repositories.activity_repository import ActivityRepository
from wellness.repositories.goal_repository import GoalRepository
from wellness.repositories.habit_repository import HabitRepository
from wellness.repositories.mood_repository import MoodLogRepository
from wellness.services.date_service import DateService
from wellness.services.happiness_service import HappinessScoreEngine
from wellness.constants import RECOMPUTE_HOUR, RECOMPUTE_MINUTE

logger = logging.getLogger("wellness.scheduler")

scheduler = AsyncIOScheduler()


def get_scored_user_ids(db: Session) -> list[str]:
    """Every user that owns an activity, mood log, goal or habit"""
    user_ids = set(ActivityRepository.get_user_ids(db))
    user_ids.update(MoodLogRepository.get_user_ids(db))
    user_ids.update(GoalRepository.get_user_ids(db))
    user_ids.update(HabitRepository.get_user_ids(db))
    return sorted(user_ids)


def recompute_all_users(
    session_factory: Callable[[], Session] = SessionLocal,
    score_date: Optional[date] = None
) -> dict:
    """
    Recompute the score of every user with data for one day.

    A failing user is logged and skipped.

    Returns:
        Dictionary with the number of users computed and the ids that failed
    """
    score_date = score_date or DateService.today()

    db = session_factory()
    try:
        user_ids = get_scored_user_ids(db)
    finally:
        db.close()

    engine = HappinessScoreEngine(session_factory)
    computed = 0
    failed = []
    for user_id in user_ids:
        try:
            engine.compute_daily_score(user_id, score_date)
            computed += 1
        except WellnessException as e:
            logger.error(f"Daily recompute failed for user={user_id}: {e}")
            failed.append(user_id)

    logger.info(f"Daily recompute for {score_date}: {computed} users, {len(failed)} failed")
    return {"computed": computed, "failed": failed}


async def run_daily_recompute():
    """Job: recompute today's happiness score for all users"""
    try:
        await asyncio.to_thread(recompute_all_users)
    except Exception as e:
        logger.error(f"Scheduler Error (Daily Recompute): {e}")


def start_scheduler():
    """Start the scheduler"""
    if not scheduler.running:
        scheduler.add_job(
            run_daily_recompute,
            CronTrigger(hour=RECOMPUTE_HOUR, minute=RECOMPUTE_MINUTE),
            id='daily_happiness_recompute',
            replace_existing=True
        )

        scheduler.start()
        logger.info(">>> APScheduler STARTED <<<")
        logger.info(f"Scheduled jobs: {[job.id for job in scheduler.get_jobs()]}")


def stop_scheduler():
    """Stop the scheduler"""
    if scheduler.running:
        scheduler.shutdown()
