# src/token_list/demo.py
import argparse
import json
import logging
import os
import sys

from .errors import TokenError

log = logging.getLogger(__name__)

DEFAULT_SOURCE = os.getenv("TOKEN_LIST_DEMO_SOURCE", "foo bar")

_FORCE_CHOICES = {"true": True, "false": False}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="token-list-demo",
        description="Apply add/remove/toggle to a space-separated token string.",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help=f'Initial source string (default: "{DEFAULT_SOURCE}")',
    )
    parser.add_argument("--add", nargs="+", default=[], metavar="TOKEN", help="Tokens to add")
    parser.add_argument(
        "--remove", nargs="+", default=[], metavar="TOKEN", help="Tokens to remove"
    )
    parser.add_argument(
        "--toggle", nargs="+", default=[], metavar="TOKEN", help="Tokens to toggle"
    )
    parser.add_argument(
        "--force",
        choices=sorted(_FORCE_CHOICES),
        default=None,
        help="Force argument passed to every toggle",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None):
    """CLI demo: bind a TokenSet to an in-memory string, mutate it, print the result as JSON."""
    from .core.token_set import TokenSet
    from .hosts import StringSource

    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    tokens = TokenSet(StringSource(DEFAULT_SOURCE if args.source is None else args.source))
    force = _FORCE_CHOICES.get(args.force)

    try:
        if args.add:
            log.debug("[demo] add %s", args.add)
            tokens.add(*args.add)
        if args.remove:
            log.debug("[demo] remove %s", args.remove)
            tokens.remove(*args.remove)
        toggled = {}
        for token in args.toggle:
            toggled[token] = tokens.toggle(token, force)
            log.debug("[demo] toggle %r force=%s -> %s", token, force, toggled[token])
    except TokenError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    result = {
        "source": tokens.to_string(),
        "tokens": list(tokens),
        "length": tokens.length,
        "writes": tokens.source.write_count,
        "toggled": toggled,
    }
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
