"""Grant search interface entry point.

Usage:
    grant-search            # open the search screen
    grant-search bus        # open and immediately search for "bus"

Reads SUPABASE_URL and SUPABASE_KEY (plus optional settings) from the
environment or a .env file.
"""

import logging
import sys
from typing import List, Optional

from .config import load_config
from .ui import GrantSearchApp

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Route logging to ``log_file``, or stdout when no file is configured.

    The terminal belongs to the UI while it runs, so a file is the default.
    """
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stdout)
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[handler], force=True)


def main(argv: Optional[List[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    config = load_config()
    configure_logging(config.log_level, config.log_file)

    initial_query = " ".join(args).strip()
    logger.info("Starting grant search interface")
    if initial_query:
        logger.info("Initial search term: %r", initial_query)

    GrantSearchApp(config, initial_query=initial_query).run()
    logger.info("Grant search interface closed")


if __name__ == "__main__":
    main()
