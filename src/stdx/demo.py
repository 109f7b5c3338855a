# src/stdx/demo.py
import argparse
import json
import re
import sys
from datetime import datetime


def _run(args: argparse.Namespace):
    from .net import get_byte_ranges, q_values
    from .stringx import split
    from .timex import distance_of_time_in_words

    if args.command == "split":
        pattern = args.pattern
        if args.regex:
            pattern = re.compile(pattern or "")
        return split(args.text, pattern, args.limit)
    if args.command == "qvalues":
        return [{"value": qv.value, "quality": qv.quality} for qv in q_values(args.header)]
    if args.command == "ranges":
        ranges = get_byte_ranges(args.header, args.size)
        return None if ranges is None else [[r.first, r.last] for r in ranges]
    if args.command == "distance":
        end = datetime.fromisoformat(args.to) if args.to else datetime.now()
        start = datetime.fromisoformat(args.since)
        return distance_of_time_in_words(start, end, args.seconds)
    raise ValueError(f"unknown command {args.command!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stdx-demo",
        description="Try the stdx helpers: Ruby split, Q-values, byte ranges, time distances.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_split = sub.add_parser("split", help="Split TEXT the way Ruby's String#split does")
    p_split.add_argument("text")
    p_split.add_argument("-p", "--pattern", default=None, help="Delimiter (default: whitespace)")
    p_split.add_argument("--regex", action="store_true", help="Treat --pattern as a regex")
    p_split.add_argument("-l", "--limit", type=int, default=None)

    p_q = sub.add_parser("qvalues", help="Parse a quality-value header such as Accept")
    p_q.add_argument("header")

    p_r = sub.add_parser("ranges", help="Parse a Range header against a resource size")
    p_r.add_argument("header")
    p_r.add_argument("--size", type=int, required=True)

    p_d = sub.add_parser("distance", help="Describe the time between two ISO datetimes")
    p_d.add_argument("since")
    p_d.add_argument("to", nargs="?", default=None, help="Defaults to now")
    p_d.add_argument("--seconds", action="store_true", help="Break down distances under a minute")
    return parser


def main(argv=None):
    """CLI demo: run one stdx helper and print its result as JSON."""
    args = build_parser().parse_args(argv)
    try:
        result = _run(args)
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
