import pytest

from services.reservation.domain.value_object import Seat


class TestSeat:
    """Seat のテスト"""

    def test_code_is_normalized(self):
        seat = Seat(code=" 12c ")
        assert seat.code == "12C"
        assert seat.row == 12

    @pytest.mark.parametrize(
        "code, row",
        [("3A", 3), ("12C", 12), ("007B", 7), ("A1", 0), ("WINDOW", 0)],
    )
    def test_row_of(self, code, row):
        assert Seat.row_of(code) == row

    def test_empty_code_raises_error(self):
        with pytest.raises(ValueError, match="Seat code cannot be empty"):
            Seat(code="   ")
