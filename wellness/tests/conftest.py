"""
Shared fixtures for wellness tests.

Each test gets its own file-backed SQLite database so the score engine's
worker threads can open independent connections to it.
"""
import pytest
from datetime import date, datetime, time, timedelta

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from wellness.database import Base
from wellness import models  # noqa: F401  registers models with Base
from wellness.models import Activity, MoodLog, Goal, Habit, HabitLog
from wellness.services.happiness_service import HappinessScoreEngine

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


@pytest.fixture
def db_engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'wellness_test.db'}",
        connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def score_engine(session_factory):
    return HappinessScoreEngine(session_factory)


@pytest.fixture
def today():
    return date(2026, 3, 15)


@pytest.fixture
def yesterday(today):
    return today - timedelta(days=1)


def add_activity(db, status, scheduled_start, completion_percentage=0, user_id=USER_ID, title="Walk"):
    """Create an activity"""
    activity = Activity(
        user_id=user_id,
        title=title,
        scheduled_start=scheduled_start,
        duration_minutes=30,
        status=status,
        completion_percentage=completion_percentage
    )
    db.add(activity)
    db.commit()
    return activity


def at(day: date, hour: int = 9, minute: int = 0) -> datetime:
    """Local datetime on a day"""
    return datetime.combine(day, time(hour, minute))


def add_mood(db, log_date, mood_score, user_id=USER_ID):
    """Create a mood log"""
    mood = MoodLog(user_id=user_id, log_date=log_date, mood_score=mood_score, mood_emoji="😊")
    db.add(mood)
    db.commit()
    return mood


def add_goal(db, target_value, current_value, user_id=USER_ID, title="Read books"):
    """Create a goal"""
    goal = Goal(user_id=user_id, title=title, target_value=target_value, current_value=current_value)
    db.add(goal)
    db.commit()
    return goal


def add_habit(db, statuses=(), start=date(2026, 3, 15), is_active=True, user_id=USER_ID, title="Meditate"):
    """
    Create a habit with one log per status, newest first starting at start.
    """
    habit = Habit(user_id=user_id, title=title, is_active=is_active)
    db.add(habit)
    db.commit()

    for offset, status in enumerate(statuses):
        db.add(HabitLog(
            habit_id=habit.id,
            user_id=user_id,
            log_date=start - timedelta(days=offset),
            status=status
        ))
    db.commit()
    return habit
