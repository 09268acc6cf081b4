# cliopts/__main__.py

import logging
import sys
from typing import Optional, Sequence

from cliopts.config.logging_config import configure_logging
from cliopts.config.settings import Settings
from cliopts.utils.commandline import build_demo_parser

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    # ------------------------------------------------------------------ #
    # 1. Settings & CLI arguments
    # ------------------------------------------------------------------ #
    settings = Settings()
    parser = build_demo_parser(settings.help_layout())

    tokens = list(sys.argv[1:] if argv is None else argv)
    positionals = parser.parse(tokens)

    if parser.is_enabled("debug"):
        # Force debug mode from the CLI when requested
        settings.debug = True

    # ------------------------------------------------------------------ #
    # 2. Logging
    # ------------------------------------------------------------------ #
    configure_logging(settings)
    logger.debug("argv=%r", tokens)

    # ------------------------------------------------------------------ #
    # 3. Output
    # ------------------------------------------------------------------ #
    if parser.is_enabled("help"):
        print(parser.help_text())
        return 0

    print(f"positional: {positionals}")
    for option in parser.options:
        if parser.is_enabled(option.name):
            print(f"{option.name}: {parser[option.name]}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
