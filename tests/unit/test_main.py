"""Test the command-line interface."""

from pathlib import Path

import pytest

from mos6502.__main__ import main, parse_int


@pytest.mark.parametrize(
    ("text", "value"),
    [("42", 42), ("0xa000", 0xa000), ("$a000", 0xa000), ("$FF", 0xff)],
)
def test_parse_int(text: str, value: int):  # noqa: D103
    assert parse_int(text) == value


def test_demo_run(capsys: pytest.CaptureFixture[str]):  # noqa: D103
    assert main([]) == 0

    err = capsys.readouterr().err
    assert "Executed 6 instructions" in err
    assert "a=$01 x=$02 y=$03" in err


def test_hex_program(capsys: pytest.CaptureFixture[str]):  # noqa: D103
    assert main(["--hex", "a9 11", "--limit", "1"]) == 0

    assert "pc=$a002 sp=$ff a=$11" in capsys.readouterr().err


def test_image_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]):  # noqa: D103
    image = tmp_path / "program.bin"
    image.write_bytes(bytes.fromhex("a2 20"))

    assert main([str(image), "--load-address", "$0200", "--limit", "1"]) == 0
    assert "pc=$0202 sp=$ff a=$00 x=$20" in capsys.readouterr().err


def test_console_output(capsys: pytest.CaptureFixture[str]):  # noqa: D103
    assert main(["--hex", "a9 21 85 0f", "--limit", "2"]) == 0

    assert capsys.readouterr().out == "!"


def test_fatal_error_exit_code(capsys: pytest.CaptureFixture[str]):  # noqa: D103
    assert main(["--hex", "02"]) == 1

    assert "mos6502: Invalid opcode 0x02 at $a000" in capsys.readouterr().err


def test_stack_overflow_exit_code(capsys: pytest.CaptureFixture[str]):  # noqa: D103
    assert main(["--hex", "00"]) == 1

    assert "Stack overflow" in capsys.readouterr().err


def test_wrapping_stack(capsys: pytest.CaptureFixture[str]):  # noqa: D103
    assert main(["--hex", "00", "--limit", "100", "--stack-policy", "wrap"]) == 0

    assert "Executed 100 instructions" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        ["--limit", "-1"],
        ["--hex", "zz"],
        ["--hex", "ea ea", "--load-address", "0xffff"],
        ["--hex", "ea", "--load-address", "0x10000", "--limit", "1"],
        ["does-not-exist.bin"],
        ["--stack-policy", "ignore"],
    ],
    ids=[
        "negative limit",
        "invalid hex",
        "program too big",
        "address out of range",
        "missing image",
        "unknown stack policy",
    ],
)
def test_usage_errors(argv: list[str]):  # noqa: D103
    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code == 2  # noqa: PLR2004
