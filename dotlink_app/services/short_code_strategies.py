"""
Short code generation strategies for dotlink.
Uses Strategy Pattern to allow different generation algorithms.
"""

import secrets
import string
from abc import ABC, abstractmethod
from enum import Enum
from typing import AbstractSet

from dotlink_app.services.exceptions import ShortCodeGenerationError


class ShortCodeStrategyType(Enum):
    """Values accepted by the ``short_code_strategy`` setting"""
    RANDOM = "random"
    BASE62 = "base62"


class ShortCodeStrategy(ABC):
    """Abstract base class for short code generation strategies"""

    @abstractmethod
    def generate(self, sequence: int, existing_codes: AbstractSet[str]) -> str:
        """
        Generate a short code.

        Args:
            sequence: 1-based position the new mapping will take in the collection
            existing_codes: Codes already in use

        Returns:
            A URL-safe short code string
        """
        pass


class RandomShortCodeStrategy(ShortCodeStrategy):
    """
    Random generation strategy.
    Draws a random URL-safe string and retries if it is already in use.

    Pros: Simple, unpredictable
    Cons: Collision risk grows with the collection
    """

    CHARACTERS = string.ascii_letters + string.digits + "-_"

    def __init__(self, length: int = 9, max_retries: int = 5):
        self.length = length
        self.max_retries = max_retries

    def generate(self, sequence: int, existing_codes: AbstractSet[str]) -> str:
        """Generate random short code with collision checking"""
        for _ in range(self.max_retries):
            short_code = self._generate_random_string()
            if short_code not in existing_codes:
                return short_code

        raise ShortCodeGenerationError(
            f"Could not generate unique short code after {self.max_retries} attempts"
        )

    def _generate_random_string(self) -> str:
        return ''.join(secrets.choice(self.CHARACTERS) for _ in range(self.length))


class Base62ShortCodeStrategy(ShortCodeStrategy):
    """
    Base62 encoding strategy with sequence obfuscation.
    Converts the mapping's position in the collection to Base62 with a salt.

    Pros: No collisions while mappings are never deleted, no retries
    Cons: Predictable if salt is known
    """

    BASE62_CHARS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

    def __init__(self, salt: int = 1000, max_length: int = 9):
        self.salt = salt
        self.max_length = max_length

    def generate(self, sequence: int, existing_codes: AbstractSet[str]) -> str:
        """
        Generate short code using Base62 encoding.

        Process:
        1. Add salt to the sequence number
        2. Encode to Base62
        3. Refuse codes longer than max_length (truncating would collide)
        """
        encoded = self._base62_encode(sequence + self.salt)

        if len(encoded) > self.max_length:
            raise ShortCodeGenerationError(
                f"Generated code '{encoded}' exceeds max length {self.max_length}. "
                f"Sequence: {sequence}. "
                f"Consider increasing max_length to handle higher volume."
            )

        return encoded

    def _base62_encode(self, number: int) -> str:
        """
        Convert integer to Base62 string.

        Base62 uses: 0-9 (10) + a-z (26) + A-Z (26) = 62 characters
        """
        if number == 0:
            return self.BASE62_CHARS[0]

        result = ""
        while number > 0:
            result = self.BASE62_CHARS[number % 62] + result
            number //= 62

        return result
