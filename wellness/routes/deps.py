"""
Shared route dependencies.
"""
from fastapi import Depends

from wellness.database import get_session_factory
from wellness.services.happiness_service import HappinessScoreEngine


def get_engine(session_factory=Depends(get_session_factory)) -> HappinessScoreEngine:
    """Score engine bound to the application's session factory"""
    return HappinessScoreEngine(session_factory)
