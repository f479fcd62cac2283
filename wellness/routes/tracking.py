"""
Tracking HTTP routes: moods, activities, goals and habits.
Every write triggers a recompute of the affected day's happiness score.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from wellness.auth import verify_api_key
from wellness.database import get_db
from wellness.schemas import (
    ActivityCreate, ActivityStatusUpdate, ActivityResponse,
    MoodLogCreate, MoodLogResponse,
    GoalCreate, GoalUpdate, GoalProgressUpdate, GoalResponse,
    HabitCreate, HabitUpdate, HabitResponse, HabitStreakResponse,
    HabitLogCreate, HabitLogResponse,
)
from wellness.services.activity_service import ActivityService
from wellness.services.goal_service import GoalService
from wellness.services.habit_service import HabitService
from wellness.services.mood_service import MoodService
from wellness.services.happiness_service import HappinessScoreEngine
from .deps import get_engine

router = APIRouter(prefix="/api", tags=["tracking"], dependencies=[Depends(verify_api_key)])


@router.post("/moods/{user_id}", response_model=MoodLogResponse, status_code=status.HTTP_201_CREATED)
def log_mood(
    user_id: str,
    mood_data: MoodLogCreate,
    db: Session = Depends(get_db),
    engine: HappinessScoreEngine = Depends(get_engine)
):
    """Log today's (or a given day's) mood by key or raw score."""
    service = MoodService(db)
    if mood_data.mood:
        mood_log = service.log_mood(user_id, mood_data.mood, mood_data.reflection_notes, mood_data.log_date)
    elif mood_data.mood_score is not None:
        mood_log = service.log_mood_score(
            user_id, mood_data.mood_score, mood_data.mood_emoji,
            mood_data.reflection_notes, mood_data.log_date
        )
    else:
        raise HTTPException(status_code=400, detail="Either mood or mood_score is required")

    engine.compute_daily_score(user_id, mood_log.log_date)
    return mood_log


@router.post("/activities/{user_id}", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED)
def create_activity(
    user_id: str,
    activity_data: ActivityCreate,
    db: Session = Depends(get_db),
    engine: HappinessScoreEngine = Depends(get_engine)
):
    """Schedule an activity."""
    activity = ActivityService(db).create_activity(user_id, activity_data)
    engine.compute_daily_score(user_id, activity.scheduled_start)
    return activity


@router.put("/activities/{activity_id}/status", response_model=ActivityResponse)
def update_activity_status(
    activity_id: int,
    status_update: ActivityStatusUpdate,
    db: Session = Depends(get_db),
    engine: HappinessScoreEngine = Depends(get_engine)
):
    """Mark an activity completed, partial, missed or scheduled."""
    activity = ActivityService(db).update_status(
        activity_id, status_update.status, status_update.completion_percentage
    )
    engine.compute_daily_score(activity.user_id, activity.scheduled_start)
    return activity


@router.post("/goals/{user_id}", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
def create_goal(
    user_id: str,
    goal_data: GoalCreate,
    db: Session = Depends(get_db),
    engine: HappinessScoreEngine = Depends(get_engine)
):
    """Create a goal."""
    goal = GoalService(db).create_goal(user_id, goal_data)
    engine.compute_daily_score(user_id)
    return goal


@router.put("/goals/{goal_id}/progress", response_model=GoalResponse)
def update_goal_progress(
    goal_id: int,
    progress: GoalProgressUpdate,
    db: Session = Depends(get_db),
    engine: HappinessScoreEngine = Depends(get_engine)
):
    """Set a goal's current value."""
    goal = GoalService(db).update_progress(goal_id, progress.current_value)
    engine.compute_daily_score(goal.user_id)
    return goal


@router.put("/goals/{goal_id}", response_model=GoalResponse)
def update_goal(
    goal_id: int,
    goal_data: GoalUpdate,
    db: Session = Depends(get_db),
    engine: HappinessScoreEngine = Depends(get_engine)
):
    """Edit a goal."""
    goal = GoalService(db).update_goal(goal_id, goal_data)
    engine.compute_daily_score(goal.user_id)
    return goal


@router.delete("/goals/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_goal(
    goal_id: int,
    db: Session = Depends(get_db),
    engine: HappinessScoreEngine = Depends(get_engine)
):
    """Delete a goal."""
    user_id = GoalService(db).delete_goal(goal_id)
    engine.compute_daily_score(user_id)


@router.post("/habits/{user_id}", response_model=HabitResponse, status_code=status.HTTP_201_CREATED)
def create_habit(
    user_id: str,
    habit_data: HabitCreate,
    db: Session = Depends(get_db)
):
    """Create a habit. A habit without logs does not affect the score."""
    return HabitService(db).create_habit(user_id, habit_data)


@router.post("/habits/{habit_id}/logs", response_model=HabitLogResponse, status_code=status.HTTP_201_CREATED)
def log_habit(
    habit_id: int,
    log_data: HabitLogCreate,
    db: Session = Depends(get_db),
    engine: HappinessScoreEngine = Depends(get_engine)
):
    """Record how a habit went on a day."""
    log = HabitService(db).log_habit(habit_id, log_data.status, log_data.log_date, log_data.notes)
    engine.compute_daily_score(log.user_id)
    return log


@router.put("/habits/{habit_id}", response_model=HabitResponse)
def update_habit(
    habit_id: int,
    habit_data: HabitUpdate,
    db: Session = Depends(get_db),
    engine: HappinessScoreEngine = Depends(get_engine)
):
    """Edit a habit, including turning it on or off."""
    habit = HabitService(db).update_habit(habit_id, habit_data)
    engine.compute_daily_score(habit.user_id)
    return habit


@router.delete("/habits/{habit_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_habit(
    habit_id: int,
    db: Session = Depends(get_db),
    engine: HappinessScoreEngine = Depends(get_engine)
):
    """Delete a habit and its logs."""
    user_id = HabitService(db).delete_habit(habit_id)
    engine.compute_daily_score(user_id)


@router.get("/habits/{habit_id}/streak", response_model=HabitStreakResponse)
def get_habit_streak(habit_id: int, db: Session = Depends(get_db)):
    """Consecutive completed days ending today."""
    return {"habit_id": habit_id, "streak": HabitService(db).get_streak(habit_id)}
