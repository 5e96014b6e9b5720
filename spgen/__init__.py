"""
Secure Password Generator package.
"""

from .alphabet import (
    ALPHABET,
    CHARACTER_CLASSES,
    DIGITS,
    LOWERCASE,
    SPECIAL,
    UPPERCASE,
    CharacterClass,
)
from .config import DEFAULT_CONFIG, MAX_LENGTH, MIN_LENGTH, PasswordGenConfig
from .entropy import DEFAULT_SAMPLER, SecureSampler
from .exceptions import (
    ConfigError,
    ParseError,
    PassGenError,
    RandomnessFailure,
    ValidationError,
)
from .generator import (
    GenerationMeta,
    Mode,
    generate_password,
    generate_password_with_meta,
    generate_uniform,
    generate_with_class_guarantee,
    shuffle_in_place,
)

__all__ = [
    "ALPHABET",
    "CHARACTER_CLASSES",
    "DIGITS",
    "LOWERCASE",
    "SPECIAL",
    "UPPERCASE",
    "CharacterClass",
    "DEFAULT_CONFIG",
    "MAX_LENGTH",
    "MIN_LENGTH",
    "PasswordGenConfig",
    "DEFAULT_SAMPLER",
    "SecureSampler",
    "ConfigError",
    "ParseError",
    "PassGenError",
    "RandomnessFailure",
    "ValidationError",
    "GenerationMeta",
    "Mode",
    "generate_password",
    "generate_password_with_meta",
    "generate_uniform",
    "generate_with_class_guarantee",
    "shuffle_in_place",
]
