"""
Tests for short code generation strategies.
"""
import pytest

from dotlink_app.services.exceptions import ShortCodeGenerationError
from dotlink_app.services.short_code_strategies import (
    RandomShortCodeStrategy,
    Base62ShortCodeStrategy
)
from dotlink_app.config import settings
from dotlink_app.dependencies import get_short_code_strategy


class TestRandomStrategy:
    """Test random generation strategy"""

    def test_generates_correct_length(self):
        strategy = RandomShortCodeStrategy(length=9)

        code = strategy.generate(1, set())

        assert len(code) == 9

    def test_codes_are_url_safe(self):
        strategy = RandomShortCodeStrategy(length=9)

        for _ in range(200):
            code = strategy.generate(1, set())
            assert set(code) <= set(RandomShortCodeStrategy.CHARACTERS)

    def test_retries_on_collision(self):
        strategy = RandomShortCodeStrategy(length=5, max_retries=3)
        strategy._generate_random_string = iter(["taken", "free0"]).__next__

        assert strategy.generate(2, {"taken"}) == "free0"

    def test_gives_up_after_max_retries(self):
        strategy = RandomShortCodeStrategy(length=5, max_retries=3)
        strategy._generate_random_string = lambda: "taken"

        with pytest.raises(ShortCodeGenerationError):
            strategy.generate(2, {"taken"})


class TestBase62Strategy:
    """Test Base62 encoding strategy"""

    def test_same_sequence_same_code(self):
        """Deterministic for a given sequence number"""
        strategy = Base62ShortCodeStrategy(salt=1000, max_length=5)

        assert strategy.generate(123, set()) == strategy.generate(123, set())

    def test_different_sequence_different_code(self):
        strategy = Base62ShortCodeStrategy(salt=1000, max_length=5)

        codes = {strategy.generate(seq, set()) for seq in range(1, 101)}

        assert len(codes) == 100

    def test_encoding(self):
        strategy = Base62ShortCodeStrategy(salt=0, max_length=5)

        assert strategy.generate(1, set()) == "1"
        assert strategy.generate(61, set()) == "Z"
        assert strategy.generate(62, set()) == "10"

    def test_obfuscation_with_salt(self):
        strategy_no_salt = Base62ShortCodeStrategy(salt=0, max_length=5)
        strategy_with_salt = Base62ShortCodeStrategy(salt=1000, max_length=5)

        assert strategy_no_salt.generate(1, set()) != strategy_with_salt.generate(1, set())

    def test_exceeding_max_length_raises(self):
        strategy = Base62ShortCodeStrategy(salt=0, max_length=2)

        assert strategy.generate(62 ** 2 - 1, set()) == "ZZ"
        with pytest.raises(ShortCodeGenerationError):
            strategy.generate(62 ** 2, set())


class TestShortCodeStrategySelection:
    """Test picking the strategy from settings"""

    def test_random_by_default(self, data_dir):
        strategy = get_short_code_strategy()

        assert isinstance(strategy, RandomShortCodeStrategy)
        assert strategy.length == settings.short_code_length
        assert strategy.max_retries == settings.max_retries

    def test_base62_from_settings(self, data_dir, monkeypatch):
        monkeypatch.setattr(settings, "short_code_strategy", "base62")

        strategy = get_short_code_strategy()

        assert isinstance(strategy, Base62ShortCodeStrategy)
        assert strategy.salt == settings.short_code_salt
        assert strategy.max_length == settings.short_code_length

    def test_unknown_strategy_raises(self, data_dir, monkeypatch):
        monkeypatch.setattr(settings, "short_code_strategy", "sequential")

        with pytest.raises(ValueError):
            get_short_code_strategy()

    def test_caches_instance(self, data_dir):
        assert get_short_code_strategy() is get_short_code_strategy()
