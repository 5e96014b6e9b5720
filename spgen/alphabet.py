"""
Character classes for password construction.

Four disjoint classes (lowercase, uppercase, digit, special) and their
concatenation, the full alphabet. Everything here is built once at import
and never changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations


@dataclass(frozen=True)
class CharacterClass:
    """
    One named, ordered group of characters.
    """

    name: str
    chars: str

    def __post_init__(self) -> None:
        if not self.chars:
            raise ValueError(f"Character class {self.name!r} is empty.")
        if len(set(self.chars)) != len(self.chars):
            raise ValueError(
                f"Character class {self.name!r} contains duplicate characters."
            )

    def __len__(self) -> int:
        return len(self.chars)

    def __getitem__(self, index: int) -> str:
        return self.chars[index]

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and char in self.chars


LOWERCASE = CharacterClass("lowercase", "abcdefghijklmnopqrstuvwxyz")
UPPERCASE = CharacterClass("uppercase", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
DIGITS = CharacterClass("digit", "0123456789")
SPECIAL = CharacterClass("special", "!@#$%^&*()-_=+[]{}|;:,.<>?")

# Order matters: class-guaranteed generation seeds one character per class
# in exactly this order before shuffling.
CHARACTER_CLASSES: tuple[CharacterClass, ...] = (LOWERCASE, UPPERCASE, DIGITS, SPECIAL)

for _a, _b in combinations(CHARACTER_CLASSES, 2):
    if set(_a.chars) & set(_b.chars):
        raise ValueError(f"Character classes {_a.name!r} and {_b.name!r} overlap.")

ALPHABET: str = "".join(cls.chars for cls in CHARACTER_CLASSES)


def classify(char: str) -> CharacterClass | None:
    """Return the class `char` belongs to, or None if it is not in the alphabet."""
    for cls in CHARACTER_CLASSES:
        if char in cls:
            return cls
    return None


def classes_in(text: str) -> tuple[str, ...]:
    """
    Names of the character classes that occur in `text`, in registry order.
    """
    return tuple(
        cls.name for cls in CHARACTER_CLASSES if any(c in cls for c in text)
    )
