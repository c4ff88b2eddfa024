import logging
import sys

from .commands.parser import build_parser
from ..fuzzy.core.types import FuzzyError
from ..fuzzy.io.config import load_config, log_level_from_config

def _setup_logging(level):
    logging.basicConfig(
        level=getattr(logging, level or "WARNING"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.cfg = load_config(args.config) if getattr(args, "config", None) else None
        cfg_level = log_level_from_config(args.cfg, args.config)
        _setup_logging(args.log_level or cfg_level)
        args.func(args)
    except FuzzyError as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(2)
    return 0

if __name__ == "__main__":
    sys.exit(main())
