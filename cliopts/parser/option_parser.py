# cliopts/parser/option_parser.py

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from cliopts.domain.errors import InvalidDefinitionError, UnknownOptionError
from cliopts.domain.options import OptionDefinition, OptionState, ParseState
from cliopts.utils.help_formatter import HelpLayout, render_help

logger = logging.getLogger(__name__)


class OptionParser:
    """Registry of command-line options plus the result of the last parse.

    Lifecycle
    ---------
    construct -> `register_option()` (any number of times) -> `parse()` ->
    `is_enabled()` / `get_option_values()` / `help_text()`.

    Matching rules
    --------------
    For each token, in order:

    - ``-c``            exact short form: triggered, no value
    - ``-c123``         short form followed by more characters: value ``"123"``
    - ``--count=456``   long form followed by ``=``: value ``"456"``
    - ``--count``       exact long form: triggered, no value
    - anything else     positional argument, kept verbatim and in order

    A bare flag never consumes the following token as its value, and grouped
    short flags (``-ab``) are not split. Matching is case-sensitive. When
    several short forms prefix the same token, the first registered wins.

    Parameters
    ----------
    header, footer:
        Text rendered verbatim above and below the option list in `help_text()`.
    layout:
        Column sizing used by `help_text()`.

    Notes
    -----
    - Duplicate names, and short/long spellings already owned by another
      option, are rejected with `InvalidDefinitionError`.
    - Each `parse()` replaces the previous result; nothing accumulates across
      calls.
    """

    def __init__(
        self,
        header: str = "",
        footer: str = "",
        *,
        layout: Optional[HelpLayout] = None,
    ) -> None:
        self.header = header
        self.footer = footer
        self.layout = layout or HelpLayout()

        self._options: Dict[str, OptionDefinition] = {}
        self._by_short: Dict[str, OptionDefinition] = {}
        self._by_long: Dict[str, OptionDefinition] = {}

        self._state = ParseState()

    # ------------------------------------------------------------------ #
    # Registry
    # ------------------------------------------------------------------ #
    def register_option(
        self,
        short_form: Optional[str] = None,
        long_form: Optional[str] = None,
        help_text: str = "",
        name: str = "",
    ) -> OptionDefinition:
        """
        Register an option and return its definition.

        Raises `InvalidDefinitionError` on an empty or duplicate name, when
        both forms are missing or malformed, or when a form is already taken.
        """
        option = OptionDefinition(
            name=name,
            short_form=short_form,
            long_form=long_form,
            help_text=help_text,
        )
        option.validate()

        if name in self._options:
            raise InvalidDefinitionError(f"Option name {name!r} is already registered.")
        if short_form is not None and short_form in self._by_short:
            owner = self._by_short[short_form].name
            raise InvalidDefinitionError(f"Short form {short_form!r} already used by {owner!r}.")
        if long_form is not None and long_form in self._by_long:
            owner = self._by_long[long_form].name
            raise InvalidDefinitionError(f"Long form {long_form!r} already used by {owner!r}.")

        self._options[name] = option
        if short_form is not None:
            self._by_short[short_form] = option
        if long_form is not None:
            self._by_long[long_form] = option

        self._state.options.setdefault(name, OptionState())

        logger.debug("Registered option %r (%s)", name, ", ".join(option.forms()))
        return option

    @property
    def options(self) -> Tuple[OptionDefinition, ...]:
        return tuple(self._options.values())

    def __contains__(self, name: object) -> bool:
        return name in self._options

    # ------------------------------------------------------------------ #
    # Parsing
    # ------------------------------------------------------------------ #
    def parse(self, tokens: Iterable[str]) -> List[str]:
        """
        Scan `tokens` once and return the positional arguments.

        Option state from any previous parse is discarded.
        Any iterable of strings is accepted, generators included.
        """
        tokens = list(tokens)
        state = ParseState.empty(self._options)

        for token in tokens:
            match = self._match(token)
            if match is None:
                state.positional_arguments.append(token)
                continue

            option, value = match
            state.options[option.name].trigger(value)

        self._state = state

        logger.debug(
            "Parsed %d token(s): %d positional, triggered=%s",
            len(tokens),
            len(state.positional_arguments),
            state.triggered_names(),
        )
        return list(state.positional_arguments)

    def _match(self, token: str) -> Optional[Tuple[OptionDefinition, Optional[str]]]:
        # Exact spellings first, so "-cx" registered on its own beats "-c" + "x"
        option = self._by_short.get(token) or self._by_long.get(token)
        if option is not None:
            return option, None

        if token.startswith("--"):
            flag, sep, value = token.partition("=")
            option = self._by_long.get(flag)
            if sep and option is not None:
                return option, value
            return None

        for option in self._options.values():
            short = option.short_form
            if short is not None and len(token) > len(short) and token.startswith(short):
                return option, token[len(short):]

        return None

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    @property
    def positional_arguments(self) -> List[str]:
        return list(self._state.positional_arguments)

    def is_enabled(self, name: str) -> bool:
        """True if the option was triggered at least once by the last parse."""
        state = self._state.options.get(name)
        return state is not None and state.triggered

    def get_option_values(self, name: str) -> List[str]:
        """
        Values captured for `name` by the last parse, in input order.

        Empty for bare flags and untriggered options.
        Raises `UnknownOptionError` if `name` was never registered.
        """
        if name not in self._options:
            raise UnknownOptionError(name)
        return list(self._state.options[name].values)

    def __getitem__(self, name: str) -> List[str]:
        return self.get_option_values(name)

    # ------------------------------------------------------------------ #
    # Help
    # ------------------------------------------------------------------ #
    def help_text(self) -> str:
        return render_help(self.header, self.footer, self.options, self.layout)
