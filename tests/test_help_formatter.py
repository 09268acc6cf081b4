# tests/test_help_formatter.py

"""Tests for cliopts/utils/help_formatter.py"""

import pytest

from cliopts.domain.options import OptionDefinition
from cliopts.utils.help_formatter import HelpLayout, render_help


@pytest.fixture
def options():
    """Mix of full, short-only and long-only options."""
    return [
        OptionDefinition(name="count", short_form="-c", long_form="--count", help_text="Count values."),
        OptionDefinition(name="quiet", short_form="-q", help_text="Less output."),
        OptionDefinition(name="dry_run", long_form="--dry-run", help_text="Do nothing."),
    ]


# =============================================================================
# render_help
# =============================================================================
class TestRenderHelp:
    def test_exact_layout(self, options):
        """Default layout: fixed columns, 4-space gaps."""
        text = render_help("Usage: prog", "Bye.", options)

        assert text == (
            "Usage: prog\n"
            "\n"
            "-c    --count             Count values.\n"
            "-q                        Less output.\n"
            "      --dry-run           Do nothing.\n"
            "\n"
            "Bye."
        )

    def test_missing_forms_are_blank(self, options):
        """No 'None' placeholder for absent forms."""
        text = render_help("H", "F", options)

        assert "None" not in text

    def test_columns_are_aligned(self, options):
        """Help strings start at the same column on every row."""
        rows = render_help("H", "F", options).split("\n")[2:5]

        columns = {row.index(o.help_text) for row, o in zip(rows, options)}
        assert len(columns) == 1

    def test_columns_grow_with_long_forms(self):
        """Wide forms widen their column instead of breaking alignment."""
        opts = [
            OptionDefinition(name="a", short_form="-abc", long_form="--a-really-long-option", help_text="A."),
            OptionDefinition(name="b", short_form="-b", long_form="--b", help_text="B."),
        ]

        rows = render_help("H", "F", opts).split("\n")[2:4]

        assert rows[0].index("A.") == rows[1].index("B.")
        assert rows[1].index("--b") == rows[0].index("--a-really-long-option")

    def test_custom_layout(self, options):
        """HelpLayout controls minimum widths and gap."""
        layout = HelpLayout(min_short_width=3, min_long_width=0, column_gap=2)

        text = render_help("H", "F", options[:1], layout)

        assert text == "H\n\n-c   --count  Count values.\n\nF"

    def test_empty_help_text_strips_trailing_spaces(self):
        """Rows never end with whitespace."""
        text = render_help("H", "F", [OptionDefinition(name="x", short_form="-x")])

        assert text == "H\n\n-x\n\nF"

    def test_no_options(self):
        """Without options only header and footer remain."""
        assert render_help("Header", "Footer", []) == "Header\n\nFooter"

    def test_header_and_footer_verbatim(self, options):
        """Multi-line header/footer are copied as-is."""
        header = "Usage:\n  prog [OPTIONS]"
        footer = "See also:\n  man prog"

        text = render_help(header, footer, options)

        assert text.startswith(header + "\n\n")
        assert text.endswith("\n\n" + footer)

    def test_order_follows_input(self, options):
        """Rows follow the given order."""
        text = render_help("H", "F", list(reversed(options)))

        assert text.index("Do nothing.") < text.index("Less output.") < text.index("Count values.")
