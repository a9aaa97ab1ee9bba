"""
Unit tests for Location.
"""
import pytest
from minesweeper import InvalidArgumentError, Location


class TestLocation:
    """Test coordinate validation, equality and hashing."""

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (-3, -3)])
    def test_negative_coordinates_rejected(self, x: int, y: int) -> None:
        """Negative coordinates raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="negative"):
            Location(x, y)

    def test_invalid_argument_is_value_error(self) -> None:
        """Callers can catch the builtin ValueError as well."""
        with pytest.raises(ValueError):
            Location(-1, 0)

    def test_value_equality(self) -> None:
        """Locations with equal coordinates are equal and hash alike."""
        assert Location(2, 3) == Location(2, 3)
        assert hash(Location(2, 3)) == hash(Location(2, 3))
        assert Location(2, 3) != Location(3, 2)

    def test_usable_as_set_member(self) -> None:
        assert len({Location(1, 1), Location(1, 1), Location(0, 1)}) == 2

    def test_unpacks_like_a_pair(self) -> None:
        x, y = Location(4, 7)
        assert (x, y) == (4, 7)

    def test_str(self) -> None:
        assert str(Location(4, 7)) == "(4, 7)"

    def test_immutable(self) -> None:
        location = Location(0, 0)
        with pytest.raises(AttributeError):
            location.x = 5
