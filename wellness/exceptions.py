"""
Custom exceptions for the wellness backend.
Provides specific exception types for better error handling and recovery.
"""


class WellnessException(Exception):
    """Base exception for wellness backend"""
    pass


class ActivityNotFoundException(WellnessException):
    """Raised when an activity is not found"""
    def __init__(self, activity_id: int):
        self.activity_id = activity_id
        super().__init__(f"Activity with ID {activity_id} not found")


class GoalNotFoundException(WellnessException):
    """Raised when a goal is not found"""
    def __init__(self, goal_id: int):
        self.goal_id = goal_id
        super().__init__(f"Goal with ID {goal_id} not found")


class HabitNotFoundException(WellnessException):
    """Raised when a habit is not found"""
    def __init__(self, habit_id: int):
        self.habit_id = habit_id
        super().__init__(f"Habit with ID {habit_id} not found")


class InvalidDateException(WellnessException):
    """Raised when a date argument cannot be interpreted as a calendar date"""
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid date: {value!r}. Expected YYYY-MM-DD")


class DataAccessException(WellnessException):
    """Raised when a store query fails or returns a malformed row"""
    def __init__(self, operation: str, details: str):
        self.operation = operation
        self.details = details
        super().__init__(f"Data access {operation} failed: {details}")


class ValidationException(WellnessException):
    """Raised when data validation fails"""
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error for {field}: {message}")
