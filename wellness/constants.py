"""
Application constants and environment-driven configuration.
"""
import os

# Database
DATABASE_URL = os.getenv("WELLNESS_DATABASE_URL", "sqlite:///./wellness.db")

if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

# Security
API_KEY = os.getenv("WELLNESS_API_KEY", "your-secret-key-change-me")

# Logging
DEFAULT_LOG_DIRECTORY_PROD = "/var/log/wellness"
DEFAULT_LOG_DIRECTORY_DEV = "./logs"
LOG_DIR = os.getenv("WELLNESS_LOG_DIR", DEFAULT_LOG_DIRECTORY_PROD)
LOG_FILE = os.getenv("WELLNESS_LOG_FILE", "app.log")

# CORS
CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "WELLNESS_CORS_ORIGINS", "http://localhost:8081,http://localhost:19006"
    ).split(",")
    if origin.strip()
]

# Scheduler (daily recompute, local time)
RECOMPUTE_HOUR = int(os.getenv("WELLNESS_RECOMPUTE_HOUR", "23"))
RECOMPUTE_MINUTE = int(os.getenv("WELLNESS_RECOMPUTE_MINUTE", "55"))

# Activity statuses
ACTIVITY_STATUS_SCHEDULED = "scheduled"
ACTIVITY_STATUS_COMPLETED = "completed"
ACTIVITY_STATUS_PARTIAL = "partial"
ACTIVITY_STATUS_MISSED = "missed"
ACTIVITY_STATUSES = (
    ACTIVITY_STATUS_SCHEDULED,
    ACTIVITY_STATUS_COMPLETED,
    ACTIVITY_STATUS_PARTIAL,
    ACTIVITY_STATUS_MISSED,
)

# Percentage stored when an activity is marked partial without an explicit value
DEFAULT_PARTIAL_PERCENTAGE = 50

# Habit log statuses
HABIT_LOG_COMPLETED = "completed"
HABIT_LOG_PARTIAL = "partial"
HABIT_LOG_MISSED = "missed"
HABIT_LOG_STATUSES = (HABIT_LOG_COMPLETED, HABIT_LOG_PARTIAL, HABIT_LOG_MISSED)

# Habit frequencies
HABIT_FREQUENCY_DAILY = "daily"
HABIT_FREQUENCY_WEEKLY = "weekly"
HABIT_FREQUENCY_MONTHLY = "monthly"
HABIT_FREQUENCIES = (HABIT_FREQUENCY_DAILY, HABIT_FREQUENCY_WEEKLY, HABIT_FREQUENCY_MONTHLY)

# Happiness score
MAX_SUB_SCORE = 100
MOOD_SCALE_MAX = 10
HABIT_WINDOW_SIZE = 7
HABIT_PARTIAL_CREDIT = 50

WEIGHT_ACTIVITY = 0.3
WEIGHT_MOOD = 0.3
WEIGHT_GOAL = 0.2
WEIGHT_HABIT = 0.2

# Summary windows
WEEKLY_WINDOW_DAYS = 7

# Habit streaks walk at most this many of a habit's newest logs
STREAK_LOG_LIMIT = 30

# Score levels shown with the summary: (minimum overall score, name, icon, description)
SCORE_LEVELS = (
    (90, "Radiant Soul", "✨", "You are glowing with happiness!"),
    (80, "Joyful Spirit", "🌟", "Your positive energy is inspiring!"),
    (70, "Happy Heart", "💖", "You are in a wonderful place!"),
    (60, "Balanced Being", "⚖️", "You have found your center!"),
    (50, "Growing Soul", "🌱", "You are on a beautiful journey!"),
    (0, "Brave Warrior", "💪", "Every step forward is courage!"),
)
