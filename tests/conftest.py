import pytest
from bs4 import BeautifulSoup

from markdown_emoji import normalize_aliases, normalize_emoji_data


@pytest.fixture
def emoji_map():
    return normalize_emoji_data(
        {
            "smile": "😄",
            "tada": "🎉",
            "laughing": "😆",
            "thumbsup": "👍",
        }
    )


@pytest.fixture
def aliases():
    return normalize_aliases({":satisfied:": ":laughing:", "+1": "thumbsup"})


@pytest.fixture
def make_soup():
    def _make_soup(markup):
        return BeautifulSoup(markup, "html.parser")

    return _make_soup
