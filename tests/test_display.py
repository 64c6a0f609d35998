"""Tests for the rich renderers."""

import io

from rich.console import Console

from llmcost.cli.display import print_header, print_model_list

from conftest import make_model


def _console(**kwargs) -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=200, **kwargs), buf


class TestModelList:
    def test_bracketed_names_stay_aligned(self):
        console, buf = _console()
        models = [
            make_model("openai/plain", name="Plain Model"),
            make_model("openai/tagged", name="Tagged [beta] [v2]"),
        ]
        print_model_list(console, models, "cached")

        rows = [line for line in buf.getvalue().splitlines() if " in  " in line]
        assert len(rows) == 2
        assert "Tagged [beta] [v2]" in rows[1]
        assert rows[0].index(" in  ") == rows[1].index(" in  ")


class TestHeader:
    def test_header_numbers_not_highlighted(self):
        console, buf = _console(force_terminal=True, color_system="truecolor")
        print_header(
            console,
            input_tokens=1500,
            output_tokens=3000,
            monthly_requests=50_000,
            source_label="cached",
            count=12,
        )
        output = buf.getvalue()
        assert "Input: 1.5K tokens | Output: 3.0K tokens | 50.0K requests/mo" in output
        assert "\x1b[" not in output
