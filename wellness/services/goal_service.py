"""
Goal management service.
Handles goals and their progress.
"""
import logging

from sqlalchemy.orm import Session

from wellness.exceptions import GoalNotFoundException, ValidationException
from wellness.models import Goal
from wellness.repositories.goal_repository import GoalRepository
from wellness.schemas import GoalCreate, GoalUpdate

logger = logging.getLogger("wellness.goal")

# Fields an update may set back to null
CLEARABLE_FIELDS = ("deadline", "category_id")


class GoalService:
    """Service for managing goals"""

    def __init__(self, db: Session):
        self.db = db
        self.goal_repo = GoalRepository()

    def create_goal(self, user_id: str, goal_data: GoalCreate) -> Goal:
        """Create a new goal"""
        goal = Goal(user_id=user_id, **goal_data.model_dump())
        goal.refresh_completion()
        return self.goal_repo.create(self.db, goal)

    def update_progress(self, goal_id: int, current_value: float) -> Goal:
        """
        Set a goal's current value and refresh its completion flag.

        Raises:
            GoalNotFoundException: No such goal
            ValidationException: Negative value
        """
        if current_value is None or current_value < 0:
            raise ValidationException("current_value", "must be zero or greater")

        goal = self.goal_repo.get_by_id(self.db, goal_id)
        if not goal:
            raise GoalNotFoundException(goal_id)

        goal.current_value = current_value
        completed = goal.refresh_completion()
        goal = self.goal_repo.update(self.db, goal)

        if completed:
            logger.info(f"Goal {goal_id} reached its target ({goal.current_value}/{goal.target_value} {goal.unit})")
        return goal

    def update_goal(self, goal_id: int, goal_data: GoalUpdate) -> Goal:
        """
        Apply the fields set on goal_data and refresh the completion flag.

        Raises:
            GoalNotFoundException: No such goal
        """
        goal = self.goal_repo.get_by_id(self.db, goal_id)
        if not goal:
            raise GoalNotFoundException(goal_id)

        was_completed = goal.is_completed
        for field, value in goal_data.model_dump(exclude_unset=True).items():
            if value is None and field not in CLEARABLE_FIELDS:
                continue
            setattr(goal, field, value)
        completed = goal.refresh_completion()
        goal = self.goal_repo.update(self.db, goal)

        if completed and not was_completed:
            logger.info(f"Goal {goal_id} reached its target ({goal.current_value}/{goal.target_value} {goal.unit})")
        return goal

    def delete_goal(self, goal_id: int) -> str:
        """
        Delete a goal.

        Returns:
            Owner's user id, so callers can recompute their score

        Raises:
            GoalNotFoundException: No such goal
        """
        goal = self.goal_repo.get_by_id(self.db, goal_id)
        if not goal:
            raise GoalNotFoundException(goal_id)

        user_id = goal.user_id
        self.goal_repo.delete(self.db, goal)
        logger.info(f"Goal {goal_id} deleted")
        return user_id
