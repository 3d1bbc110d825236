"""
Shared fixtures: ranking page markup builders.
"""

import pytest


def digit_spans(score: int) -> str:
    return "".join(
        f'<span class="typography typography-{digit}"></span>' for digit in str(score)
    )


def creator_card(name: str, score: int | None) -> str:
    digits = "" if score is None else digit_spans(score)
    return (
        '<li class="creator-card">'
        f'<div class="creator-info"><a href="#"><div class="name">{name}</div></a></div>'
        f'<div class="mario100-point">{digits}</div>'
        '</li>'
    )


def ranking_page(entries: list[tuple[str, int | None]]) -> str:
    cards = "".join(creator_card(name, score) for name, score in entries)
    return (
        "<html><body>"
        '<div class="header"><div class="name">Not a creator</div></div>'
        f'<ul class="creator-ranking">{cards}</ul>'
        "</body></html>"
    )


@pytest.fixture
def page_builder():
    return ranking_page


@pytest.fixture
def scenario_a_html():
    return ranking_page([("Alice", 120), ("Bob", 45), ("Cara", 10)])
