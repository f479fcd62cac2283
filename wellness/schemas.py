from pydantic import BaseModel, Field
from datetime import datetime, date
from typing import Optional

from wellness.constants import HABIT_FREQUENCIES

FREQUENCY_PATTERN = f"^({'|'.join(HABIT_FREQUENCIES)})$"


# Activity schemas
class ActivityCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    scheduled_start: datetime
    duration_minutes: int = Field(default=30, ge=1, le=1440)
    notes: str = ""
    subcategory_id: Optional[int] = None


class ActivityStatusUpdate(BaseModel):
    status: str  # scheduled, completed, partial, missed
    completion_percentage: Optional[int] = Field(None, ge=0, le=100)  # partial only


class ActivityResponse(BaseModel):
    id: int
    user_id: str
    subcategory_id: Optional[int] = None
    title: str
    scheduled_start: datetime
    duration_minutes: int
    notes: str = ""
    status: str
    completion_percentage: int

    class Config:
        from_attributes = True


# Mood schemas
class MoodLogCreate(BaseModel):
    # Either a mood key ("happy", "neutral", ...) or a raw 0-10 score
    mood: Optional[str] = None
    mood_score: Optional[int] = Field(None, ge=0, le=10)
    mood_emoji: str = ""
    reflection_notes: str = ""
    log_date: Optional[date] = None


class MoodLogResponse(BaseModel):
    id: int
    user_id: str
    log_date: date
    mood_score: int
    mood_emoji: str = ""
    reflection_notes: str = ""

    class Config:
        from_attributes = True


# Goal schemas
class GoalCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    target_value: float = Field(..., ge=0)
    current_value: float = Field(default=0, ge=0)
    unit: str = ""
    deadline: Optional[date] = None
    category_id: Optional[int] = None


class GoalUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    target_value: Optional[float] = Field(None, ge=0)
    current_value: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None
    deadline: Optional[date] = None
    category_id: Optional[int] = None


class GoalProgressUpdate(BaseModel):
    current_value: float = Field(..., ge=0)


class GoalResponse(BaseModel):
    id: int
    user_id: str
    title: str
    target_value: float
    current_value: float
    unit: str = ""
    deadline: Optional[date] = None
    is_completed: bool

    class Config:
        from_attributes = True


# Habit schemas
class HabitCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    frequency: str = Field(default="daily", pattern=FREQUENCY_PATTERN)
    target_count: int = Field(default=1, ge=1, le=100)
    is_active: bool = True
    subcategory_id: Optional[int] = None


class HabitUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    frequency: Optional[str] = Field(None, pattern=FREQUENCY_PATTERN)
    target_count: Optional[int] = Field(None, ge=1, le=100)
    is_active: Optional[bool] = None


class HabitResponse(BaseModel):
    id: int
    user_id: str
    title: str
    description: str = ""
    frequency: str
    target_count: int
    is_active: bool

    class Config:
        from_attributes = True


class HabitStreakResponse(BaseModel):
    habit_id: int
    streak: int


class HabitLogCreate(BaseModel):
    status: str  # completed, partial, missed
    log_date: Optional[date] = None
    notes: str = ""


class HabitLogResponse(BaseModel):
    id: int
    habit_id: int
    log_date: date
    status: str
    notes: str = ""

    class Config:
        from_attributes = True


# Happiness score schemas
class HappinessScoreResponse(BaseModel):
    user_id: str
    score_date: date
    activity_score: int
    mood_score: int
    goal_score: int
    habit_score: int
    overall_score: int

    class Config:
        from_attributes = True


class ScoreLevelResponse(BaseModel):
    name: str
    icon: str
    description: str


class ScoreSummaryResponse(BaseModel):
    today_score: int
    weekly_average: Optional[int] = None
    monthly_average: Optional[int] = None
    level: ScoreLevelResponse
    completed_today: int = 0
    active_goals: int = 0
    active_habits: int = 0


# Activity catalog schemas
class SubcategoryResponse(BaseModel):
    id: int
    category_id: int
    name: str
    icon: str = ""
    suggested_duration: int
    sort_order: int

    class Config:
        from_attributes = True


class CategoryResponse(BaseModel):
    id: int
    name: str
    icon: str = ""
    color: str = ""
    sort_order: int

    class Config:
        from_attributes = True
