"""Show the pocket logger at work."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from datetime import datetime

from pockets.pocketlog import Level, Logger, add_prefix_based_on_level


def main(argv: Sequence[str] | None = None) -> int:
    """Log a few messages at each level to standard output."""
    parser = argparse.ArgumentParser(description="Demonstrate the pocket logger.")
    parser.parse_args(argv)

    logger = Logger(
        Level.DEBUG,
        output=sys.stdout,
        message_options=[add_prefix_based_on_level()],
    )
    logger.infof("A little copying is better than a little dependency.")
    logger.errorf("Errors are values. Documentation is for %s.", "users")
    logger.debugf("Make the zero (%d) value useful.", 0)
    logger.infof("Hallo, %d %s", 2022, datetime.now())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())