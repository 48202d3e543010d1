from decimal import Decimal

import pytest

from services.shared.utils import config


class TestConfig:
    """環境変数から読み込む設定値のテスト"""

    def test_premium_rows_default(self, monkeypatch):
        monkeypatch.delenv("PREMIUM_ROWS", raising=False)
        assert config.premium_rows() == frozenset({1, 2, 3, 4})

    def test_premium_rows_from_env(self, monkeypatch):
        monkeypatch.setenv("PREMIUM_ROWS", "1, 2,10")
        assert config.premium_rows() == frozenset({1, 2, 10})

    def test_invalid_premium_rows_raises_error(self, monkeypatch):
        monkeypatch.setenv("PREMIUM_ROWS", "1,a")
        with pytest.raises(ValueError, match="Invalid PREMIUM_ROWS entry"):
            config.premium_rows()

    def test_baggage_defaults(self, monkeypatch):
        monkeypatch.delenv("BAGGAGE_FREE_ALLOWANCE_KG", raising=False)
        monkeypatch.delenv("BAGGAGE_RATE_PER_KG", raising=False)
        assert config.baggage_free_allowance_kg() == 0
        assert config.baggage_rate_per_kg() == Decimal("0")

    def test_negative_rate_raises_error(self, monkeypatch):
        monkeypatch.setenv("BAGGAGE_RATE_PER_KG", "-1")
        with pytest.raises(ValueError):
            config.baggage_rate_per_kg()

    def test_non_numeric_rate_raises_error(self, monkeypatch):
        monkeypatch.setenv("BAGGAGE_RATE_PER_KG", "ten")
        with pytest.raises(ValueError, match="Invalid BAGGAGE_RATE_PER_KG"):
            config.baggage_rate_per_kg()
