import pytest

from services.user.domain.value_object import Email, UserId


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email("  Ada@Example.COM ").value == "ada@example.com"

    def test_equal_after_normalization(self):
        assert Email("ADA@example.com") == Email("ada@example.com")

    @pytest.mark.parametrize("value", ["", "   ", "ada", "@example.com", "ada@"])
    def test_invalid_address(self, value):
        with pytest.raises(ValueError, match="Invalid email address"):
            Email(value)


class TestUserId:
    def test_generate_is_unique(self):
        assert UserId.generate() != UserId.generate()

    def test_empty_is_rejected(self):
        with pytest.raises(ValueError):
            UserId(value=" ")
