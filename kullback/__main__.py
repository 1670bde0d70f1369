"""
Command-line front end.

Usage:
    python -m kullback ciphertext.txt
    python -m kullback --text xyzxyzxyzxyz --range 6
    python -m kullback dump.b64 --encoding BASE64 --output scan.png
"""

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from .decode import ENCODINGS, decode
from .engine import analyze
from .errors import KullbackError
from .render import Curve


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="kullback",
        description="Estimate the key length of a periodic cipher with the Kullback test."
    )
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("filename", nargs="?", help="File holding the ciphertext")
    src.add_argument("--text", help="Ciphertext given directly")
    parser.add_argument("--encoding", choices=ENCODINGS, default="UTF8",
                        help="Encoding of the input (default: UTF8)")
    parser.add_argument("--range", type=int, default=None,
                        help="Check periods below this (default: half the input length)")
    parser.add_argument("--workers", type=int, default=None,
                        help="Processes used for scoring (default: KULLBACK_WORKERS or 1)")
    parser.add_argument("--output", help="Save the graph here instead of showing it")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.text is not None:
        raw = args.text
    else:
        with open(args.filename, "r", encoding="utf-8") as f:
            raw = f.read()
        if args.encoding != "UTF8":
            raw = "".join(raw.split())

    try:
        stream = decode(raw, args.encoding)
        max_period = args.range if args.range is not None else len(stream) // 2
        _, ax = plt.subplots()
        scores = analyze(ax, stream, max_period, workers=args.workers)
    except KullbackError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    spikes = Curve.from_scores(scores).spikes
    print(f"{'period':>6}  {'IoC':>8}")
    for i, score in enumerate(scores):
        mark = "  *" if i in spikes else ""
        print(f"{i + 1:>6}  {score:8.5f}{mark}")

    if args.output:
        plt.savefig(args.output)
    else:
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
