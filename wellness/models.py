from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, Float, Date, Text,
    ForeignKey, UniqueConstraint, Index
)
from sqlalchemy.orm import relationship
from datetime import datetime

from wellness.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    icon = Column(String, default="")
    color = Column(String, default="")
    sort_order = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.now)

    subcategories = relationship("Subcategory", back_populates="category")


class Subcategory(Base):
    __tablename__ = "subcategories"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    name = Column(String, nullable=False)
    icon = Column(String, default="")
    suggested_duration = Column(Integer, default=30)  # minutes
    sort_order = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.now)

    category = relationship("Category", back_populates="subcategories")


class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    subcategory_id = Column(Integer, ForeignKey("subcategories.id"), nullable=True)
    title = Column(String, nullable=False)
    scheduled_start = Column(DateTime, nullable=False)
    duration_minutes = Column(Integer, default=30)
    notes = Column(Text, default="")
    status = Column(String, default="scheduled")  # scheduled, completed, partial, missed
    completion_percentage = Column(Integer, default=0)  # 0-100, only read when partial
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    __table_args__ = (
        Index("ix_activities_user_start", "user_id", "scheduled_start"),
    )


class MoodLog(Base):
    __tablename__ = "mood_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    log_date = Column(Date, nullable=False)
    mood_score = Column(Integer, nullable=False)  # 0-10
    mood_emoji = Column(String, default="")
    reflection_notes = Column(Text, default="")
    created_at = Column(DateTime, default=datetime.now)

    __table_args__ = (
        UniqueConstraint("user_id", "log_date", name="uq_mood_user_date"),
    )


class Goal(Base):
    __tablename__ = "goals"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    title = Column(String, nullable=False)
    description = Column(Text, default="")
    target_value = Column(Float, nullable=False, default=0)
    current_value = Column(Float, nullable=False, default=0)
    unit = Column(String, default="")
    deadline = Column(Date, nullable=True)
    is_completed = Column(Boolean, default=False)  # current_value >= target_value
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    def refresh_completion(self) -> bool:
        """Recalculate is_completed from current and target values"""
        self.is_completed = (self.current_value or 0) >= (self.target_value or 0)
        return self.is_completed


class Habit(Base):
    __tablename__ = "habits"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    subcategory_id = Column(Integer, ForeignKey("subcategories.id"), nullable=True)
    title = Column(String, nullable=False)
    description = Column(Text, default="")
    frequency = Column(String, default="daily")  # daily, weekly, monthly
    target_count = Column(Integer, default=1)  # per period
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.now)

    logs = relationship("HabitLog", back_populates="habit", cascade="all, delete-orphan")


class HabitLog(Base):
    __tablename__ = "habit_logs"

    id = Column(Integer, primary_key=True, index=True)
    habit_id = Column(Integer, ForeignKey("habits.id"), nullable=False, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    log_date = Column(Date, nullable=False)
    status = Column(String, nullable=False)  # completed, partial, missed
    notes = Column(Text, default="")
    created_at = Column(DateTime, default=datetime.now)

    habit = relationship("Habit", back_populates="logs")

    __table_args__ = (
        UniqueConstraint("habit_id", "log_date", name="uq_habit_log_date"),
    )


class HappinessScore(Base):
    __tablename__ = "happiness_scores"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    score_date = Column(Date, nullable=False)
    activity_score = Column(Integer, default=0)  # 0-100
    mood_score = Column(Integer, default=0)      # 0-100
    goal_score = Column(Integer, default=0)      # 0-100
    habit_score = Column(Integer, default=0)     # 0-100
    overall_score = Column(Integer, default=0)   # 0-100
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    __table_args__ = (
        UniqueConstraint("user_id", "score_date", name="uq_happiness_user_date"),
    )
