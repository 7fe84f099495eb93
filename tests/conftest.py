"""Pytest configuration and shared fixtures for svg-ticket tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from svg_ticket import Config, TicketRenderer


@pytest.fixture
def renderer() -> TicketRenderer:
    """Return a renderer using the default ticket profile."""
    return TicketRenderer()


@pytest.fixture
def compact_config() -> Config:
    """Return the compact, dynamic-height profile."""
    return Config.profile("compact")


@pytest.fixture
def temp_ticket_text(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary raw text input file."""
    text_path = tmp_path / "input.txt"
    text_path.write_text(
        "\n"
        "NS Dagretour\n"
        "- Geldig op 15 december 2025\n"
        "\n"
        "- Geldig in trein, bus, tram en metro\n"
        "Niet geldig in Thalys en Eurostar\n",
        encoding="utf-8",
    )
    yield text_path


@pytest.fixture
def simple_svg_content() -> str:
    """Return a simple SVG string with a single raw text element."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 200 100">
  <text x="10" y="50" font-family="Arial" font-size="24">Test</text>
</svg>"""


@pytest.fixture
def tspan_svg_content() -> str:
    """Return untagged SVG with tspan lines, as older output looked."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="300" height="200" viewBox="0 0 300 200">
  <text x="10" y="50" font-family="Arial" font-size="24">
    <tspan x="10" dy="0">Hello</tspan>
    <tspan x="10" dy="30">World</tspan>
  </text>
  <rect x="10" y="80" width="12" height="12" fill="#0079D3" />
  <text x="40" y="90" font-family="Arial" font-size="20">
    <tspan x="40" dy="0">First item</tspan>
  </text>
</svg>"""


@pytest.fixture
def no_text_svg_content() -> str:
    """Return SVG without any text elements."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="blue"/>
  <circle cx="50" cy="50" r="30" fill="red"/>
</svg>"""


@pytest.fixture
def malformed_svg_content() -> str:
    """Return malformed SVG for error testing."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg">
  <text x="10" y="50">Unclosed text
</svg>"""

