"""
Tests for the happiness sub-score calculators.

Tests cover:
1. Half-up rounding
2. Activity, mood, goal and habit sub-scores
3. Weighted combination
"""
import pytest
from types import SimpleNamespace

from wellness.exceptions import DataAccessException
from wellness.services.happiness_service import (
    round_half_up,
    activity_contribution,
    calculate_activity_score,
    calculate_mood_score,
    calculate_goal_score,
    calculate_habit_log_score,
    calculate_habit_score,
    combine_scores,
)


def activity(status, completion_percentage=0, id=1):
    return SimpleNamespace(id=id, status=status, completion_percentage=completion_percentage)


def goal(target_value, current_value, id=1):
    return SimpleNamespace(id=id, target_value=target_value, current_value=current_value)


def logs(*statuses):
    return [SimpleNamespace(id=i, status=s) for i, s in enumerate(statuses)]


class TestRounding:
    """Tests for round_half_up"""

    def test_halves_round_up(self):
        """Halves should round up, not to even"""
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(62.5) == 63

    def test_below_half_rounds_down(self):
        assert round_half_up(66.49) == 66

    def test_negative_halves_round_towards_positive(self):
        assert round_half_up(-2.5) == -2


class TestActivityScore:
    """Tests for calculate_activity_score"""

    def test_no_activities_scores_zero(self):
        assert calculate_activity_score([]) == 0

    def test_completed_and_missed_average(self):
        """[completed, missed] -> (100 + 0) / 2 = 50"""
        assert calculate_activity_score([activity("completed"), activity("missed")]) == 50

    def test_order_does_not_matter(self):
        forward = [activity("completed"), activity("partial", 40), activity("scheduled")]
        assert calculate_activity_score(forward) == calculate_activity_score(list(reversed(forward)))

    def test_partial_uses_completion_percentage(self):
        assert calculate_activity_score([activity("partial", 75)]) == 75

    def test_percentage_ignored_unless_partial(self):
        """Completed always counts 100, missed and scheduled 0, whatever is stored"""
        assert activity_contribution(activity("completed", 10)) == 100
        assert activity_contribution(activity("missed", 80)) == 0
        assert activity_contribution(activity("scheduled", 80)) == 0

    def test_mean_is_rounded_half_up(self):
        """(100 + 25) / 2 = 62.5 -> 63"""
        assert calculate_activity_score([activity("completed"), activity("partial", 25)]) == 63

    def test_capped_at_100(self):
        assert calculate_activity_score([activity("partial", 150)]) == 100

    def test_unknown_status_is_malformed(self):
        with pytest.raises(DataAccessException):
            calculate_activity_score([activity("cancelled")])

    def test_partial_without_percentage_is_malformed(self):
        with pytest.raises(DataAccessException):
            calculate_activity_score([activity("partial", None)])


class TestMoodScore:
    """Tests for calculate_mood_score"""

    def test_no_log_scores_zero(self):
        assert calculate_mood_score(None) == 0

    @pytest.mark.parametrize("raw,expected", [(7, 70), (10, 100), (0, 0), (3, 30)])
    def test_linear_rescale(self, raw, expected):
        assert calculate_mood_score(SimpleNamespace(id=1, mood_score=raw)) == expected

    def test_missing_score_is_malformed(self):
        with pytest.raises(DataAccessException):
            calculate_mood_score(SimpleNamespace(id=1, mood_score=None))


class TestGoalScore:
    """Tests for calculate_goal_score"""

    def test_no_goals_scores_zero(self):
        assert calculate_goal_score([]) == 0

    def test_progress_is_capped_per_goal(self):
        """50% and 150%-capped-to-100% -> 75"""
        assert calculate_goal_score([goal(10, 5), goal(10, 15)]) == 75

    def test_zero_target_does_not_divide_by_zero(self):
        assert calculate_goal_score([goal(0, 5)]) == 0

    def test_zero_target_goal_still_counts_in_average(self):
        """A zero-target goal adds 0 progress but is still averaged over: (100 + 0) / 2"""
        assert calculate_goal_score([goal(10, 10), goal(0, 3)]) == 50

    def test_fractional_progress_rounded(self):
        """1/3 -> 33.33"""
        assert calculate_goal_score([goal(3, 1)]) == 33


class TestHabitScore:
    """Tests for calculate_habit_log_score and calculate_habit_score"""

    def test_completed_partial_missed(self):
        """((1×100) + (1×50) + 0) / (3×100) × 100 = 50"""
        assert calculate_habit_log_score(logs("completed", "partial", "missed")) == 50

    def test_all_completed(self):
        assert calculate_habit_log_score(logs(*["completed"] * 7)) == 100

    def test_averages_over_logged_days_only(self):
        """Two logged days, both completed -> 100 even though the window is 7"""
        assert calculate_habit_log_score(logs("completed", "completed")) == 100

    def test_habits_without_logs_are_skipped(self):
        """An unlogged habit does not drag the average towards 0"""
        assert calculate_habit_score([logs("completed"), []]) == 100

    def test_no_logged_habits_scores_zero(self):
        assert calculate_habit_score([]) == 0
        assert calculate_habit_score([[], []]) == 0

    def test_mean_of_per_habit_scores(self):
        """Habit A 100, habit B 50 -> 75"""
        assert calculate_habit_score([logs("completed"), logs("partial")]) == 75

    def test_per_habit_rounding_happens_first(self):
        """
        A: [completed, missed, missed] -> 33.3 -> 33
        B: [completed, completed, missed] -> 66.7 -> 67
        mean 50
        """
        assert calculate_habit_score([
            logs("completed", "missed", "missed"),
            logs("completed", "completed", "missed"),
        ]) == 50

    def test_unknown_status_is_malformed(self):
        with pytest.raises(DataAccessException):
            calculate_habit_log_score(logs("skipped"))


class TestCombination:
    """Tests for combine_scores"""

    def test_weighted_sum(self):
        """80×0.3 + 60×0.3 + 100×0.2 + 40×0.2 = 70"""
        assert combine_scores(80, 60, 100, 40) == 70

    def test_all_zero(self):
        assert combine_scores(0, 0, 0, 0) == 0

    def test_all_full(self):
        assert combine_scores(100, 100, 100, 100) == 100

    def test_half_rounds_up(self):
        """5×0.3 = 1.5 -> 2"""
        assert combine_scores(5, 0, 0, 0) == 2
