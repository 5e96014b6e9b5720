import os

import pytest

from spgen import cli
from spgen.alphabet import ALPHABET
from spgen.config import PasswordGenConfig
from spgen.entropy import SecureSampler
from spgen.exceptions import ParseError, ValidationError
from spgen.generator import Mode


def _scripted(*replies):
    answers = iter(replies)
    return lambda prompt: next(answers)


def _password_line(out: str) -> str:
    line = next(l for l in out.splitlines() if l.startswith("Generated password: "))
    return line[len("Generated password: "):]


@pytest.mark.parametrize("text,expected", [("12", 12), (" 8\n", 8), ("-3", -3), ("0", 0)])
def test_parse_length(text, expected):
    assert cli.parse_length(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "12.5", "1e3", "0x10"])
def test_parse_length_rejects_non_numbers(text):
    with pytest.raises(ParseError) as exc_info:
        cli.parse_length(text)
    assert exc_info.value.text == text
    assert exc_info.value.code == "INVALID_NUMBER"


def test_parse_error_is_not_a_validation_error():
    with pytest.raises(ParseError) as exc_info:
        cli.parse_length("ten")
    assert not isinstance(exc_info.value, ValidationError)


@pytest.mark.parametrize("text,mode", [("2", Mode.CLASS_GUARANTEED), ("1", Mode.UNIFORM), ("x", Mode.UNIFORM)])
def test_parse_mode(text, mode):
    assert cli.parse_mode(text) is mode


def test_strong_password_from_flags(capsys):
    code = cli.main(["--mode", "2", "--length", "10", "--samples", "0"])
    out = capsys.readouterr().out

    assert code == cli.EXIT_OK
    pw = _password_line(out)
    assert len(pw) == 10
    assert "Contains lowercase letters" in out
    assert "Length: 10 characters" in out
    assert "Sample passwords" not in out


def test_interactive_prompts(capsys):
    code = cli.main(["--samples", "3"], read=_scripted("1", "9"))
    out = capsys.readouterr().out

    assert code == cli.EXIT_OK
    assert "=== Password Generator ===" in out
    pw = _password_line(out)
    assert len(pw) == 9
    assert all(c in ALPHABET for c in pw)
    samples = out.split("=== Sample passwords ===\n", 1)[1].splitlines()
    assert [s[:3] for s in samples] == ["1. ", "2. ", "3. "]
    assert all(len(s[3:]) == 12 for s in samples)


def test_empty_length_is_invalid_input(capsys):
    cfg = PasswordGenConfig(sample_count=0)
    code = cli.main([], read=_scripted("2", ""), config=cfg)
    out = capsys.readouterr().out
    assert code == cli.EXIT_BAD_INPUT
    assert "Invalid length input!" in out
    assert "Generated password" not in out


def test_non_numeric_length_still_prints_samples(capsys):
    code = cli.main(["--mode", "1", "--length", "twelve", "--samples", "5"])
    out = capsys.readouterr().out
    assert code == cli.EXIT_BAD_INPUT
    assert "Generated password" not in out
    error_at = out.index("Invalid length input!")
    samples_at = out.index("=== Sample passwords ===")
    assert error_at < samples_at
    samples = out[samples_at:].splitlines()[1:]
    assert len(samples) == 5
    assert all(len(s[3:]) == 12 for s in samples)


@pytest.mark.parametrize("length", ["7", "17"])
def test_out_of_range_length(capsys, length):
    code = cli.main(["--mode", "2", "--length", length])
    out = capsys.readouterr().out
    assert code == cli.EXIT_BAD_INPUT
    assert "Error: Password length must be between 8 and 16" in out
    assert out.index("Error: Password length") < out.index("=== Sample passwords ===")


def test_bad_environment_exits_with_message(monkeypatch, capsys):
    monkeypatch.setenv("SPGEN_SAMPLE_COUNT", "five")
    code = cli.main(["--mode", "1", "--length", "12"])
    out = capsys.readouterr().out
    assert code == cli.EXIT_BAD_INPUT
    assert "Error: Invalid configuration in SPGEN_SAMPLE_COUNT." in out
    assert "Generated password" not in out


def test_bad_log_format_in_environment(monkeypatch, capsys):
    monkeypatch.setenv("SPGEN_LOG_FORMAT", "xml")
    assert cli.main(["--mode", "1", "--length", "12"]) == cli.EXIT_BAD_INPUT
    assert "SPGEN_LOG_FORMAT" in capsys.readouterr().out


def test_randomness_failure_exit_code(capsys):
    def broken(k):
        raise OSError("no entropy")

    code = cli.main(["--mode", "1", "--length", "12"], sampler=SecureSampler(broken))
    captured = capsys.readouterr()
    assert code == cli.EXIT_RANDOMNESS
    assert "Generated password" not in captured.out
    assert "Password generation aborted" in captured.err


def test_randomness_failure_during_samples(capsys):
    # The main uniform password of length 12 takes 12 draws; fail after that.
    calls = []

    def fails_after_main(k):
        calls.append(k)
        if len(calls) > 12:
            raise OSError("no entropy")
        return os.urandom(k)

    code = cli.main(
        ["--mode", "1", "--length", "12", "--samples", "3"],
        sampler=SecureSampler(fails_after_main),
    )
    captured = capsys.readouterr()
    assert code == cli.EXIT_RANDOMNESS
    assert len(_password_line(captured.out)) == 12
    assert "Sample generation aborted" in captured.err
