"""Command line harness that prints a Romu output stream as JSON."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "stream_logs" / "latest_stream.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from romu import VARIANTS, StreamConfig, run_stream


def _parse_int(value: str) -> int:
    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Expected a decimal or 0x-prefixed integer, received '{value}'."
        ) from exc


def _parse_state(value: str) -> tuple[int, ...]:
    """Parse a comma-separated list of state words (decimal or 0x hex)."""

    parts = [part.strip() for part in value.split(",") if part.strip()]
    if not parts:
        raise argparse.ArgumentTypeError("State cannot be empty.")
    return tuple(_parse_int(part) for part in parts)


def _parse_count(value: str) -> int:
    count = _parse_int(value)
    if count < 0:
        raise argparse.ArgumentTypeError("Counts must be non-negative integers.")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print a deterministic Romu output stream")
    parser.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        default="quad",
        help="Generator variant to run",
    )
    parser.add_argument(
        "--seed",
        type=_parse_int,
        default=0xA2B94D10,
        help="Seed value (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--state",
        metavar="w1,w2,...",
        type=_parse_state,
        default=None,
        help="Explicit comma-separated state vector; overrides --seed",
    )
    parser.add_argument("--count", type=_parse_count, default=16, help="Number of outputs to report")
    parser.add_argument("--skip", type=_parse_count, default=0, help="Outputs to discard first")
    parser.add_argument(
        "--bins",
        type=_parse_count,
        default=0,
        help="Chi-square bucket count (power of two); 0 disables the quality block",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "stream_logs/latest_stream.json under the repository root."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = StreamConfig(
        variant=args.variant,
        seed=args.seed,
        state=args.state,
        count=args.count,
        skip=args.skip,
        bins=args.bins,
    )
    try:
        result = run_stream(cfg)
    except ValueError as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
