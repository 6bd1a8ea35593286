from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from tilewalk import config
from tilewalk.engine import Engine


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=_level(level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tilewalk", description="Walk the overworld and read signs.")
    parser.add_argument("--config", help="YAML file overriding the default settings")
    parser.add_argument("--log-level", help="logging level (overrides the config file)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level or "INFO")
    cfg = config.load_config(args.config)
    if not args.log_level:
        # the config file may lower or raise the level once it is read
        logging.getLogger().setLevel(_level(cfg.log_level))
    engine = Engine(cfg)
    engine.run()


if __name__ == "__main__":
    main()
