"""
User domain entity: profile, points/level progression and activity streaks.
"""
import copy
import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, Optional

from .base import Entity
from ..exceptions import ValidationException


@dataclass(kw_only=True, eq=False)
class User(Entity):
    """
    Application user.

    Level is derived from total points: 1 + floor(sqrt(points / 100)).
    """
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    level: int = 1
    total_points: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    last_activity_date: Optional[date] = None
    unit_system: str = "metric"
    locale: str = "fr"
    preferences: Optional[Dict[str, Any]] = None

    # Constants
    NAME_MAX_LENGTH = 100
    UNIT_SYSTEMS = ("metric", "imperial")
    ACTIVE_WINDOW_DAYS = 7

    def __post_init__(self) -> None:
        """Validate user data on construction."""
        self._validate()

    def _validate(self) -> None:
        """Validate user data."""
        errors = {}

        if not self.username or not self.username.strip():
            errors['username'] = ['Username is required']

        if self.first_name and len(self.first_name) > self.NAME_MAX_LENGTH:
            errors['first_name'] = [f'First name cannot exceed {self.NAME_MAX_LENGTH} characters']

        if self.last_name and len(self.last_name) > self.NAME_MAX_LENGTH:
            errors['last_name'] = [f'Last name cannot exceed {self.NAME_MAX_LENGTH} characters']

        if self.unit_system not in self.UNIT_SYSTEMS:
            errors['unit_system'] = ['Unit system must be metric or imperial']

        if errors:
            raise ValidationException(
                message="Invalid user data",
                errors=errors
            )

    @property
    def full_name(self) -> str:
        """First and last name, or the username when neither is set."""
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else self.username

    def add_points(self, points: int) -> None:
        """Add points and recompute the level."""
        self.total_points += points
        self.level = 1 + math.floor(math.sqrt(self.total_points / 100))

    @staticmethod
    def _points_for_level(level: int) -> int:
        return (level - 1) * (level - 1) * 100

    @property
    def points_to_next_level(self) -> int:
        return max(0, self._points_for_level(self.level + 1) - self.total_points)

    @property
    def level_progress_percentage(self) -> float:
        """Progress towards the next level, between 0 and 100."""
        current = self._points_for_level(self.level)
        target = self._points_for_level(self.level + 1)
        if target == current:
            return 100.0
        progress = (self.total_points - current) / (target - current)
        return min(100.0, max(0.0, progress * 100))

    @property
    def rank(self) -> str:
        if self.level >= 50:
            return "Légende"
        if self.level >= 30:
            return "Expert"
        if self.level >= 20:
            return "Avancé"
        if self.level >= 10:
            return "Confirmé"
        if self.level >= 5:
            return "Intermédiaire"
        return "Débutant"

    def update_streak(self, today: Optional[date] = None) -> None:
        """
        Record activity for ``today`` and maintain the consecutive-day streak.

        Same-day activity is a no-op; a gap of more than one day restarts
        the streak at 1.
        """
        today = today or date.today()

        if self.last_activity_date is None:
            self.current_streak = 1
        else:
            days = abs((today - self.last_activity_date).days)
            if days == 0:
                return
            if days == 1:
                self.current_streak += 1
            else:
                self.current_streak = 1

        self.last_activity_date = today
        self.longest_streak = max(self.longest_streak, self.current_streak)

    def is_active(self, today: Optional[date] = None) -> bool:
        """Whether the user was active within the last seven days."""
        if self.last_activity_date is None:
            return False
        today = today or date.today()
        return self.last_activity_date >= today - timedelta(days=self.ACTIVE_WINDOW_DAYS)

    def set_preference(self, key: str, value: Any) -> None:
        preferences = dict(self.preferences or {})
        preferences[key] = value
        self.preferences = preferences

    def get_preference(self, key: str, default: Any = None) -> Any:
        return (self.preferences or {}).get(key, default)

    @staticmethod
    def default_preferences() -> Dict[str, Any]:
        """Preference tree given to newly registered users."""
        return copy.deepcopy(_DEFAULT_PREFERENCES)


_DEFAULT_PREFERENCES: Dict[str, Any] = {
    'notifications': {
        'dailyReminder': True,
        'goalDeadline': True,
        'achievements': True,
        'weeklyReport': True,
    },
    'privacy': {
        'profilePublic': False,
        'statsPublic': False,
    },
    'display': {
        'theme': 'auto',
        'chartType': 'line',
        'showAnimations': True,
    },
    'goals': {
        'defaultFrequency': 'daily',
        'autoArchive': True,
        'reminderTime': '20:00',
    },
}
