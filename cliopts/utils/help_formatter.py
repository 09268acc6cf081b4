# cliopts/utils/help_formatter.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from cliopts.domain.options import OptionDefinition


@dataclass(frozen=True)
class HelpLayout:
    """Column sizing for `render_help()`."""

    min_short_width: int = 2
    min_long_width: int = 16
    column_gap: int = 4


def render_help(
    header: str,
    footer: str,
    options: Sequence[OptionDefinition],
    layout: HelpLayout = HelpLayout(),
) -> str:
    """
    Render the help message.

    Layout:
      <header>

      <short>    <long>              <help>
      ...

      <footer>

    One row per option, in the given order. A missing form is a blank column.
    """
    sections: List[str] = [header]

    rows = _render_rows(options, layout)
    if rows:
        sections.append("\n".join(rows))

    sections.append(footer)
    return "\n\n".join(sections)


def _render_rows(options: Sequence[OptionDefinition], layout: HelpLayout) -> List[str]:
    if not options:
        return []

    short_width = max([layout.min_short_width] + [len(o.short_form or "") for o in options])
    long_width = max([layout.min_long_width] + [len(o.long_form or "") for o in options])
    gap = " " * layout.column_gap

    rows = []
    for option in options:
        short = (option.short_form or "").ljust(short_width)
        long = (option.long_form or "").ljust(long_width)
        rows.append(f"{short}{gap}{long}{gap}{option.help_text}".rstrip())
    return rows
