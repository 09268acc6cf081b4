# cliopts/domain/options.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from cliopts.domain.errors import InvalidDefinitionError

SHORT_FORM_PATTERN = re.compile(r"^-[^-\s=][^\s=]*$")
LONG_FORM_PATTERN = re.compile(r"^--[^-\s=][^\s=]*$")


@dataclass(frozen=True)
class OptionDefinition:
    """
    One registered option.

    At least one of `short_form` / `long_form` is set (checked by `validate()`).
    """

    name: str
    short_form: Optional[str] = None
    long_form: Optional[str] = None
    help_text: str = ""

    def forms(self) -> Tuple[str, ...]:
        return tuple(f for f in (self.short_form, self.long_form) if f is not None)

    def validate(self) -> None:
        if not self.name:
            raise InvalidDefinitionError("Option name must not be empty.")

        if self.short_form is None and self.long_form is None:
            raise InvalidDefinitionError(
                f"Option {self.name!r} needs a short form, a long form, or both."
            )

        if self.short_form is not None and not SHORT_FORM_PATTERN.match(self.short_form):
            raise InvalidDefinitionError(
                f"Invalid short form {self.short_form!r} for option {self.name!r} "
                "(expected e.g. '-c')."
            )

        if self.long_form is not None and not LONG_FORM_PATTERN.match(self.long_form):
            raise InvalidDefinitionError(
                f"Invalid long form {self.long_form!r} for option {self.name!r} "
                "(expected e.g. '--count')."
            )


@dataclass
class OptionState:
    triggered: bool = False
    values: List[str] = field(default_factory=list)

    def trigger(self, value: Optional[str] = None) -> None:
        # Bare flags keep `values` untouched but still count as triggered
        self.triggered = True
        if value is not None:
            self.values.append(value)


@dataclass
class ParseState:
    """
    Result of one `OptionParser.parse()` call.

    Replaced (never merged) on each parse.
    """

    positional_arguments: List[str] = field(default_factory=list)
    options: Dict[str, OptionState] = field(default_factory=dict)

    @classmethod
    def empty(cls, names: Iterable[str]) -> "ParseState":
        return cls(options={name: OptionState() for name in names})

    def triggered_names(self) -> List[str]:
        return [name for name, state in self.options.items() if state.triggered]
