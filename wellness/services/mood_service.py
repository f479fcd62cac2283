"""
Mood logging service.
Maps the moods a user can pick to their emoji, band and stored 0-10 score,
and keeps at most one mood log per user per day.
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import Dict, Optional

from sqlalchemy.orm import Session

from wellness.exceptions import ValidationException
from wellness.models import MoodLog
from wellness.repositories.mood_repository import MoodLogRepository
from wellness.services.date_service import DateService, DateLike
from wellness.constants import MOOD_SCALE_MAX

logger = logging.getLogger("wellness.mood")


@dataclass(frozen=True)
class MoodBand:
    key: str
    emoji: str
    band: str
    score: int


MOOD_BANDS: Dict[str, MoodBand] = {
    band.key: band
    for band in (
        MoodBand("ecstatic", "😊", "great", 10),
        MoodBand("happy", "😊", "good", 8),
        MoodBand("satisfied", "😌", "good", 8),
        MoodBand("neutral", "😐", "okay", 5),
        MoodBand("reflective", "🤔", "okay", 5),
        MoodBand("sad", "😔", "low", 3),
    )
}


def resolve_mood(mood: str) -> MoodBand:
    """Look up a mood key (case-insensitive)"""
    band = MOOD_BANDS.get((mood or "").strip().lower())
    if band is None:
        raise ValidationException("mood", f"unknown mood {mood!r}, expected one of {sorted(MOOD_BANDS)}")
    return band


class MoodService:
    """Service for mood logging"""

    def __init__(self, db: Session):
        self.db = db
        self.mood_repo = MoodLogRepository()

    def log_mood(
        self,
        user_id: str,
        mood: str,
        notes: str = "",
        log_date: DateLike = None
    ) -> MoodLog:
        """
        Log a mood picked from MOOD_BANDS, replacing any log for that day.

        Args:
            user_id: Owner
            mood: Mood key, e.g. "happy"
            notes: Free-text reflection
            log_date: Day of the log, defaults to today

        Returns:
            The stored mood log
        """
        band = resolve_mood(mood)
        return self.log_mood_score(user_id, band.score, band.emoji, notes, log_date)

    def log_mood_score(
        self,
        user_id: str,
        score: int,
        emoji: str = "",
        notes: str = "",
        log_date: DateLike = None
    ) -> MoodLog:
        """Log a raw 0-10 mood score, replacing any log for that day"""
        if score is None or not 0 <= score <= MOOD_SCALE_MAX:
            raise ValidationException("mood_score", f"must be between 0 and {MOOD_SCALE_MAX}")

        target_date = DateService.coerce_date(log_date)
        mood_log = self.mood_repo.upsert(self.db, user_id, target_date, {
            "mood_score": score,
            "mood_emoji": emoji,
            "reflection_notes": notes or "",
        })
        logger.info(f"Mood logged for user={user_id} date={target_date}: {score}")
        return mood_log

    def get_mood(self, user_id: str, log_date: Optional[date] = None) -> Optional[MoodLog]:
        """Get the mood log for a day, defaults to today"""
        return self.mood_repo.get_by_date(self.db, user_id, DateService.coerce_date(log_date))
