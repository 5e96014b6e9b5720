"""
Command-line interface: interactive menu around the password builder.
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Sequence

from .alphabet import ALPHABET
from .config import DEFAULT_CONFIG, PasswordGenConfig
from .entropy import SecureSampler
from .exceptions import ConfigError, ParseError, RandomnessFailure, ValidationError
from .generator import Mode, generate_password_with_meta, generate_uniform
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_RANDOMNESS = 1
EXIT_BAD_INPUT = 2


def parse_length(text: str) -> int:
    """
    Turn user text into an int. Range checking is left to the generator.
    """
    stripped = text.strip()
    try:
        return int(stripped, 10)
    except ValueError as exc:
        raise ParseError(text) from exc


def parse_mode(text: str) -> Mode:
    """
    "2" selects the class-guaranteed password; anything else is uniform.
    """
    if text.strip() == "2":
        return Mode.CLASS_GUARANTEED
    return Mode.UNIFORM


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spgen",
        description="Generate passwords from a cryptographically secure source.",
    )
    parser.add_argument(
        "--mode",
        choices=["1", "2"],
        help="1 = simple password, 2 = strong password (all character types)",
    )
    parser.add_argument(
        "--length",
        help=f"password length ({DEFAULT_CONFIG.min_length}-{DEFAULT_CONFIG.max_length})",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=None,
        help="number of sample passwords to print afterwards",
    )
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--log-format", choices=["text", "json"], default=None)
    return parser


def _prompt_mode(read: Callable[[str], str]) -> str:
    print("=== Password Generator ===")
    print("Choose an option:")
    print("1. Simple password")
    print("2. Strong password (contains all character types)")
    return read("Your choice (1 or 2): ")


def _prompt_length(read: Callable[[str], str], cfg: PasswordGenConfig) -> str:
    return read(f"Enter password length ({cfg.min_length}-{cfg.max_length}): ")


def _print_samples(count: int, length: int, sampler: SecureSampler | None) -> None:
    print("\n=== Sample passwords ===")
    for i in range(count):
        print(f"{i + 1}. {generate_uniform(length, sampler)}")


def main(
    argv: Sequence[str] | None = None,
    read: Callable[[str], str] = input,
    config: PasswordGenConfig | None = None,
    sampler: SecureSampler | None = None,
) -> int:
    """
    Entry point for `spgen`, `python -m spgen` or `run_spgen.py`.
    """
    try:
        cfg = config or PasswordGenConfig.from_env()
    except ConfigError as exc:
        print(f"Error: {exc.message}")
        return EXIT_BAD_INPUT

    args = build_parser().parse_args(argv)

    configure_logging(
        log_format=args.log_format or cfg.log_format,
        log_level=args.log_level or cfg.log_level,
    )

    mode_text = args.mode if args.mode is not None else _prompt_mode(read)
    length_text = args.length if args.length is not None else _prompt_length(read, cfg)
    mode = parse_mode(mode_text)

    try:
        length = parse_length(length_text)
        meta = generate_password_with_meta(length, mode, sampler)
    except ParseError:
        print("Invalid length input!")
        status = EXIT_BAD_INPUT
    except ValidationError as exc:
        print(f"Error: {exc.message}")
        status = EXIT_BAD_INPUT
    except RandomnessFailure as exc:
        logger.error("Password generation aborted: %s", exc.message)
        return EXIT_RANDOMNESS
    else:
        print(f"\nGenerated password: {meta.password}")
        if meta.mode is Mode.CLASS_GUARANTEED:
            print("Contains lowercase letters, uppercase letters, digits and special characters")
        print(f"Length: {meta.length} characters")
        print(f"Entropy: {meta.entropy_bits:.1f} bits ({len(ALPHABET)}-character alphabet)")
        status = EXIT_OK

    # Samples are shown whether or not the requested password succeeded
    samples = args.samples if args.samples is not None else cfg.sample_count
    if samples > 0:
        try:
            _print_samples(samples, cfg.sample_length, sampler)
        except RandomnessFailure as exc:
            logger.error("Sample generation aborted: %s", exc.message)
            return EXIT_RANDOMNESS

    return status
