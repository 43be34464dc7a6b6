"""Shared test fixtures for StrengthsLens."""

from collections.abc import Callable

import pytest

from strengthslens.catalog import ThemeCatalog, default_catalog
from strengthslens.extractors.locator import ThemeMatch, locate_themes

SAMPLE_REPORT = """Jane Smith
CliftonStrengths Top 5

1. Achiever ®
You work hard and take great satisfaction from being busy and productive.
You finish the day with something to show for it.

WHY YOUR ACHIEVER IS UNIQUE

Driven by your talents, you finish what you start. You rarely leave a task half done.

Chances are good that you set goals for every day of the week. Lists help you see progress.

Instinctively, you push yourself to do more than others expect of you.

APPLY YOUR ACHIEVER TO SUCCEED

"Your stamina turns big ambitions into finished work."

- Keep a visible list of completed tasks so you can celebrate your progress each week.
- Partner with people who help you prioritize, so your energy goes to the goals that matter.
- Take time to rest between big projects so your drive stays sustainable over the long run.

2. Strategic ®
You create alternative ways to proceed. Faced with any scenario, you can quickly spot
the relevant patterns and issues.

3. Learner ®
You have a great desire to learn and want to continuously improve. The process of
learning excites you.

HOW LEARNER BLENDS WITH YOUR OTHER TOP FIVE

LEARNER + ACHIEVER Your curiosity gives your drive fresh targets, so each finished
project teaches you something new.
STRATEGIC + LEARNER What you learn feeds the patterns you see, and your plans get
sharper with every new subject.

4. Focus ®
You can take a direction, follow through and make the corrections necessary to stay
on track. You prioritize, then act.

5. Relator ®
You enjoy close relationships with others. You find deep satisfaction in working
hard with friends to achieve a goal.

Executing themes help you make things happen.
"""


class StaticTextExtractor:
    """Text extractor double that returns canned text and records its input."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.calls: list[bytes] = []

    def extract(self, data: bytes) -> str:
        self.calls.append(data)
        return self.text


@pytest.fixture
def catalog() -> ThemeCatalog:
    """The standard 34-theme catalog."""
    return default_catalog()


@pytest.fixture
def sample_text() -> str:
    """Plain text of a Top 5 report with personalized sections."""
    return SAMPLE_REPORT


@pytest.fixture
def make_extractor() -> Callable[[str], StaticTextExtractor]:
    """Factory for text extractors that return fixed text."""
    return StaticTextExtractor


@pytest.fixture
def find_match(catalog: ThemeCatalog) -> Callable[[str, str], ThemeMatch]:
    """Locate a theme's first mention in a text by slug."""

    def _find(text: str, slug: str) -> ThemeMatch:
        for match in locate_themes(text, catalog):
            if match.theme.slug == slug:
                return match
        raise AssertionError(f"{slug} not found in text")

    return _find
