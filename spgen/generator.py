"""
Password builder: uniform and class-guaranteed generation.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import MutableSequence, TypeVar

from .alphabet import ALPHABET, CHARACTER_CLASSES, classes_in
from .config import MAX_LENGTH, MIN_LENGTH
from .entropy import DEFAULT_SAMPLER, SecureSampler
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Mode(enum.Enum):
    UNIFORM = "uniform"
    CLASS_GUARANTEED = "class-guaranteed"


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """

    password: str
    mode: Mode
    length: int

    # Theoretical strength: length * log2(|alphabet|)
    entropy_bits: float

    # Names of the character classes that ended up in the password
    classes_present: tuple[str, ...]


def validate_length(length: int) -> int:
    """
    Check that `length` is an int in [MIN_LENGTH, MAX_LENGTH].

    Raises ValidationError carrying the offending value otherwise.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise ValidationError(length, (MIN_LENGTH, MAX_LENGTH))
    if length < MIN_LENGTH or length > MAX_LENGTH:
        raise ValidationError(length, (MIN_LENGTH, MAX_LENGTH))
    return length


def shuffle_in_place(
    items: MutableSequence[T],
    sampler: SecureSampler | None = None,
) -> MutableSequence[T]:
    """
    Fisher–Yates shuffle driven by the secure sampler.

    Walks i from the last index down to 1 and swaps items[i] with
    items[j], j uniform in [0, i]. Every permutation is equally likely.
    """
    rng = sampler or DEFAULT_SAMPLER
    for i in range(len(items) - 1, 0, -1):
        j = rng.next_index(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def generate_uniform(length: int, sampler: SecureSampler | None = None) -> str:
    """
    Every character drawn independently and uniformly from the full alphabet.
    """
    validate_length(length)
    rng = sampler or DEFAULT_SAMPLER
    logger.debug("Generating uniform password of length %d", length)

    alphabet_size = len(ALPHABET)
    return "".join(ALPHABET[rng.next_index(alphabet_size)] for _ in range(length))


def generate_with_class_guarantee(
    length: int,
    sampler: SecureSampler | None = None,
) -> str:
    """
    Password with at least one lowercase, uppercase, digit and special
    character.

    - Seed positions 0..3 with one character from each class, in order.
    - Fill the rest from the full alphabet, one fresh draw per position.
    - Shuffle the whole thing so the seeded characters can land anywhere.
    """
    validate_length(length)
    rng = sampler or DEFAULT_SAMPLER
    logger.debug("Generating class-guaranteed password of length %d", length)

    chars = [cls[rng.next_index(len(cls))] for cls in CHARACTER_CLASSES]

    alphabet_size = len(ALPHABET)
    for _ in range(len(CHARACTER_CLASSES), length):
        chars.append(ALPHABET[rng.next_index(alphabet_size)])

    shuffle_in_place(chars, rng)
    return "".join(chars)


def generate_password(
    length: int,
    mode: Mode = Mode.UNIFORM,
    sampler: SecureSampler | None = None,
) -> str:
    """
    High-level function: dispatch to the generator for `mode`.
    """
    if mode is Mode.CLASS_GUARANTEED:
        return generate_with_class_guarantee(length, sampler)
    return generate_uniform(length, sampler)


def generate_password_with_meta(
    length: int,
    mode: Mode = Mode.UNIFORM,
    sampler: SecureSampler | None = None,
) -> GenerationMeta:
    password = generate_password(length, mode, sampler)
    return GenerationMeta(
        password=password,
        mode=mode,
        length=len(password),
        entropy_bits=len(password) * math.log2(len(ALPHABET)),
        classes_present=classes_in(password),
    )
