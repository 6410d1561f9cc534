"""Test configuration and fixtures for contrastkit tests."""

import pytest
from hypothesis import settings
from typing import List, Tuple

from contrastkit.analysis import cached_search

# Configure hypothesis settings for faster tests
settings.register_profile("fast", max_examples=20, deadline=5000)
settings.load_profile("fast")


@pytest.fixture
def primary_hexes() -> List[Tuple[str, Tuple[int, int, int]]]:
    """Provide canonical hex colors with their RGB values."""
    return [
        ("#000000", (0, 0, 0)),         # Black
        ("#ffffff", (255, 255, 255)),   # White
        ("#ff0000", (255, 0, 0)),       # Red
        ("#00ff00", (0, 255, 0)),       # Green
        ("#0000ff", (0, 0, 255)),       # Blue
        ("#808080", (128, 128, 128)),   # Gray
    ]


@pytest.fixture
def color_format_examples() -> List[Tuple[str, str]]:
    """Provide examples of accepted color notations with the expected canonical hex."""
    return [
        ("#abc", "#aabbcc"),
        ("ABC", "#aabbcc"),
        ("#FF0000", "#ff0000"),
        ("ff0000", "#ff0000"),
        ("  #00ff00  ", "#00ff00"),
        ("#ff000080", "#ff0000"),
        ("#f008", "#ff0000"),
        ("rgb(255, 0, 0)", "#ff0000"),
        ("RGB(0 255 0)", "#00ff00"),
        ("rgba(0, 0, 255, 0.5)", "#0000ff"),
        ("rgb(0 0 255 / 50%)", "#0000ff"),
        ("rgb(100%, 0%, 0%)", "#ff0000"),
        ("hsl(120, 100%, 50%)", "#00ff00"),
        ("HSLA(0deg 100% 50% / 0.25)", "#ff0000"),
        ("hsl(0, 0%, 100%)", "#ffffff"),
    ]


@pytest.fixture
def invalid_color_formats() -> List[object]:
    """Provide inputs that are not colors."""
    return [
        "not-a-color",
        "",
        "   ",
        "#",
        "#gggggg",
        "#12345",
        "#1234567",
        "#123456789",
        "rgb(255, 0)",
        "rgb(255, 0, 0, 0.5, 1)",
        "rgb(red, green, blue)",
        "hsl(10%, 50%, 50%)",
        "rgba(0, 0, 0, half)",
        "cmyk(0, 0, 0, 0)",
        "rgb(1e999, 0, 0)",
        "hsl(1e999, 50%, 50%)",
        "rgba(0, 0, 0, 1e999)",
        None,
        42,
    ]


@pytest.fixture(autouse=True)
def clear_search_cache():
    """Clear the memoized suggestion search between tests."""
    cached_search.cache_clear()
    yield
    cached_search.cache_clear()
