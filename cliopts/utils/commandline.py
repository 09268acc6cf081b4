# cliopts/utils/commandline.py

from typing import Optional

from cliopts.parser.option_parser import OptionParser
from cliopts.utils.help_formatter import HelpLayout

DEMO_HEADER = "Usage: python -m cliopts [OPTIONS] [ARGS]..."
DEMO_FOOTER = "Values are attached to the flag: -c123 or --count=123."


def build_demo_parser(layout: Optional[HelpLayout] = None) -> OptionParser:
    """
    Parser used by `python -m cliopts`.

    Options:
      -c / --count   : collect count values
      -C / --context : collect context values
      --debug        : enable DEBUG-level logs
      -h / --help    : print help and exit
    """
    parser = OptionParser(DEMO_HEADER, DEMO_FOOTER, layout=layout)

    parser.register_option("-c", "--count", "Count values to collect.", name="count")
    parser.register_option("-C", "--context", "Context values to collect.", name="context")
    parser.register_option(None, "--debug", "Enable DEBUG-level logs (more verbose).", name="debug")
    parser.register_option("-h", "--help", "Show this message and exit.", name="help")

    return parser
