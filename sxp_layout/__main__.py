"""Dry-run a layout scheme: ``python -m sxp_layout "h c (v ...)" --items 4``."""

import argparse
import json
import logging
import sys

from . import parse_with_diagnostics, format_scheme, layout_pass, DEFAULT_MAX_WORD_LENGTH


def _item_names(args):
    if args.names:
        return [n for n in args.names.split(',') if n]
    return [f"item{i}" for i in range(args.items)]


def build_parser():
    parser = argparse.ArgumentParser(
        prog="sxp_layout",
        description="Resolve an S-expression layout scheme against a list of items")
    parser.add_argument("scheme", help="Scheme text, e.g. 'h c (v ...)'")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--items", type=int, default=4, help="Number of generated items")
    group.add_argument("--names", type=str, default="", help="Comma separated item names")
    parser.add_argument("--frame", type=int, nargs=4, default=[0, 0, 1920, 1080],
                        metavar=("X", "Y", "W", "H"), help="Workspace rectangle")
    parser.add_argument("--max-word-length", type=int, default=DEFAULT_MAX_WORD_LENGTH,
                        help="Truncate longer words (0 disables truncation)")
    parser.add_argument("--tree", action="store_true", help="Print the normalised scheme")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parser warnings")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")
    log = logging.getLogger("sxp_layout")

    scheme, warnings = parse_with_diagnostics(
        args.scheme, max_word_length=args.max_word_length or None)
    for w in warnings:
        log.debug(w)
    if scheme is None:
        print("Scheme is empty", file=sys.stderr)
        return 1

    placements = layout_pass(scheme, _item_names(args), args.frame)

    if args.json:
        doc = {
            "scheme": format_scheme(scheme),
            "frame": list(args.frame),
            "placements": [
                {"item": item, "x": r.x, "y": r.y, "w": r.w, "h": r.h}
                for item, r in placements
            ],
            "warnings": warnings,
        }
        print(json.dumps(doc, indent=2))
        return 0

    if args.tree:
        print(format_scheme(scheme))
    for item, r in placements:
        print(f"{item:12s} {r.x:6d} {r.y:6d} {r.w:6d} {r.h:6d}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
