"""
Unit tests for the User entity.
"""
from datetime import date

import pytest

from songpool.domain.entities import Song, User
from songpool.domain.exceptions import ValidationException
from tests.factories import SongFactory, UserFactory


class TestUserValidation:

    def test_requires_username(self):
        with pytest.raises(ValidationException) as exc_info:
            User(username="  ")
        assert "username" in exc_info.value.errors

    def test_rejects_long_names(self):
        with pytest.raises(ValidationException) as exc_info:
            UserFactory(first_name="x" * 101, last_name="y" * 101)
        assert set(exc_info.value.errors) == {"first_name", "last_name"}

    def test_rejects_unknown_unit_system(self):
        with pytest.raises(ValidationException):
            UserFactory(unit_system="furlongs")

    def test_defaults(self):
        user = User(username="ada")
        assert user.level == 1
        assert user.total_points == 0
        assert user.unit_system == "metric"
        assert user.locale == "fr"
        assert user.lifecycle.status is None


class TestFullName:

    def test_first_and_last(self):
        assert UserFactory(first_name="Ada", last_name="Lovelace").full_name == "Ada Lovelace"

    def test_only_last(self):
        assert UserFactory(first_name=None, last_name="Lovelace").full_name == "Lovelace"

    def test_falls_back_to_username(self):
        user = UserFactory(username="ada", first_name=None, last_name=None)
        assert user.full_name == "ada"


class TestPointsAndLevel:
    """Level = 1 + floor(sqrt(points / 100))."""

    @pytest.mark.parametrize("points,level", [
        (0, 1),
        (99, 1),
        (100, 2),
        (399, 2),
        (400, 3),
        (10000, 11),
    ])
    def test_add_points_recomputes_level(self, points, level):
        user = UserFactory()
        user.add_points(points)
        assert user.total_points == points
        assert user.level == level

    def test_points_accumulate(self):
        user = UserFactory()
        user.add_points(60)
        user.add_points(60)
        assert user.total_points == 120
        assert user.level == 2

    def test_points_to_next_level(self):
        user = UserFactory()
        assert user.points_to_next_level == 100
        user.add_points(150)
        assert user.points_to_next_level == 250

    def test_level_progress_percentage(self):
        user = UserFactory()
        user.add_points(250)
        # level 2 spans 100..400 points
        assert user.level_progress_percentage == pytest.approx(50.0)

    def test_level_progress_is_clamped(self):
        user = UserFactory(level=1, total_points=1000)
        assert user.level_progress_percentage == 100.0

    @pytest.mark.parametrize("level,rank", [
        (1, "Débutant"),
        (5, "Intermédiaire"),
        (10, "Confirmé"),
        (20, "Avancé"),
        (30, "Expert"),
        (50, "Légende"),
    ])
    def test_rank(self, level, rank):
        assert UserFactory(level=level).rank == rank


class TestStreak:

    def test_first_activity_starts_streak(self):
        user = UserFactory()
        user.update_streak(date(2025, 6, 1))
        assert user.current_streak == 1
        assert user.longest_streak == 1
        assert user.last_activity_date == date(2025, 6, 1)

    def test_consecutive_days_extend_streak(self):
        user = UserFactory()
        for day in (1, 2, 3):
            user.update_streak(date(2025, 6, day))
        assert user.current_streak == 3
        assert user.longest_streak == 3

    def test_same_day_is_noop(self):
        user = UserFactory()
        user.update_streak(date(2025, 6, 1))
        user.update_streak(date(2025, 6, 1))
        assert user.current_streak == 1

    def test_gap_resets_but_keeps_longest(self):
        user = UserFactory()
        for day in (1, 2, 3):
            user.update_streak(date(2025, 6, day))
        user.update_streak(date(2025, 6, 10))
        assert user.current_streak == 1
        assert user.longest_streak == 3
        assert user.last_activity_date == date(2025, 6, 10)

    @pytest.mark.parametrize("last_activity,active", [
        (None, False),
        (date(2025, 6, 10), True),
        (date(2025, 6, 3), True),
        (date(2025, 6, 2), False),
    ])
    def test_is_active_within_seven_days(self, last_activity, active):
        user = UserFactory(last_activity_date=last_activity)
        assert user.is_active(today=date(2025, 6, 10)) is active


class TestPreferences:

    def test_set_and_get(self):
        user = UserFactory()
        user.set_preference("theme", "dark")
        assert user.get_preference("theme") == "dark"
        assert user.get_preference("missing", "fallback") == "fallback"

    def test_default_preferences_are_copies(self):
        first = User.default_preferences()
        first["display"]["theme"] = "dark"
        assert User.default_preferences()["display"]["theme"] == "auto"

    def test_default_preference_keys(self):
        """Stored preference JSON uses camelCase keys."""
        preferences = User.default_preferences()
        assert preferences["notifications"]["dailyReminder"] is True
        assert preferences["privacy"] == {"profilePublic": False, "statsPublic": False}
        assert preferences["goals"]["reminderTime"] == "20:00"


class TestEntityIdentity:

    def test_same_type_and_id_are_equal(self):
        assert SongFactory(id=1) == SongFactory(id=1)
        assert hash(SongFactory(id=1)) == hash(SongFactory(id=1))

    def test_unsaved_entities_only_equal_themselves(self):
        song = SongFactory()
        assert song == song
        assert song != SongFactory()

    def test_different_types_with_same_id_differ(self):
        assert SongFactory(id=1) != UserFactory(id=1)

    def test_song_fields(self):
        song = Song(name="Hymn", artiste="Choir")
        assert song.id is None
        assert song.artiste == "Choir"
