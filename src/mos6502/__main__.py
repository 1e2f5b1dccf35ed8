"""Command-line entry point: load a program image and run it on the emulated 6502."""

import argparse
import logging
import sys
from pathlib import Path

from mos6502.config import CODE_START, CPUConfig, StackPolicy
from mos6502.errors import EmulatorError
from mos6502.system import DEMO_PROGRAM, create_system


def parse_int(value: str) -> int:
    """Parse a decimal, `0x` or `$` prefixed hexadecimal integer."""
    if value.startswith("$"):
        return int(value[1:], 16)
    return int(value, 0)


def build_arg_parser() -> argparse.ArgumentParser:  # noqa: D103
    parser = argparse.ArgumentParser(
        prog="mos6502",
        description="Run a raw 6502 program image. Without an image, a subroutine call demo is run.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "image",
        nargs="?",
        type=Path,
        help="Path to a raw binary program image",
    )
    source.add_argument(
        "--hex",
        help="Program image given as hexadecimal digits, e.g. 'a9 11 4a'",
    )
    parser.add_argument(
        "--load-address",
        type=parse_int,
        default=CODE_START,
        help=f"Address the image is loaded to and execution starts at (default: ${CODE_START:04x})",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Number of instructions to execute (default: run until the CPU halts)",
    )
    parser.add_argument(
        "--use-reset-vector",
        action="store_true",
        help="Start execution at the address stored in the reset vector at $fffc",
    )
    parser.add_argument(
        "--stack-policy",
        choices=[policy.value for policy in StackPolicy],
        default=StackPolicy.FATAL.value,
        help="Whether stack over- and underflows halt the CPU or wrap around (default: fatal)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every executed instruction",
    )
    return parser


def main(argv: list[str] | None = None) -> int:  # noqa: D103
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.image is not None:
        if not args.image.exists():
            parser.error(f"Image file not found: {args.image}")
        program = args.image.read_bytes()
    elif args.hex is not None:
        try:
            program = bytes.fromhex(args.hex)
        except ValueError as e:
            parser.error(f"Invalid hex program: {e}")
    else:
        program = DEMO_PROGRAM
        if args.limit is None:
            args.limit = 6

    if args.limit is not None and args.limit < 0:
        parser.error("--limit must not be negative")

    try:
        config = CPUConfig(
            code_start=args.load_address,
            use_reset_vector=args.use_reset_vector,
            stack_policy=StackPolicy(args.stack_policy),
        )
        cpu = create_system(program, load_address=args.load_address, config=config)
    except ValueError as e:
        parser.error(str(e))

    try:
        executed = cpu.run(args.limit)
    except EmulatorError as e:
        sys.stderr.write(f"mos6502: {e}\n")
        return 1
    finally:
        sys.stdout.flush()

    sys.stderr.write(f"Executed {executed} instructions: {cpu.snapshot()}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
