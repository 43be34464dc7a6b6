"""Tests for apply-section extraction."""

import pytest

from strengthslens.extractors.apply import (
    extract_action_items,
    extract_apply_section,
    extract_tagline,
)
from strengthslens.models import ApplySection

FOCUS_REPORT = """1. Focus ®
You can take a direction, follow through and make the corrections necessary.

APPLY YOUR FOCUS TO SUCCEED

"Set the destination, then clear the path."

- Write down three goals each Monday and review them before you leave on Friday.
- Ask a trusted colleague to check in on your progress every two weeks.
- Block time on your calendar for deep work and protect it from meetings.

2. Relator ®
You enjoy close relationships with others.
"""


class TestExtractApplySection:
    """Test extract_apply_section function."""

    def test_tagline_and_first_two_items(self, find_match) -> None:
        """Test a quoted tagline and the first two dash items, in source order."""
        section = extract_apply_section(FOCUS_REPORT, find_match(FOCUS_REPORT, "focus"))
        assert section == ApplySection(
            tagline="Set the destination, then clear the path.",
            action_items=(
                "Write down three goals each Monday and review them before you leave on Friday.",
                "Ask a trusted colleague to check in on your progress every two weeks.",
            ),
        )

    def test_missing_section(self, find_match) -> None:
        text = "1. Focus ®\nYou can take a direction and follow through.\n"
        assert extract_apply_section(text, find_match(text, "focus")) is None

    def test_empty_section(self, find_match) -> None:
        """Test a header with neither tagline nor items gives no section."""
        text = "1. Focus ®\n\nAPPLY YOUR FOCUS TO SUCCEED\n\nok\n"
        assert extract_apply_section(text, find_match(text, "focus")) is None

    def test_tagline_only(self, find_match) -> None:
        text = '1. Focus ®\n\nAPPLY YOUR FOCUS TO SUCCEED\n\n"Aim first, then act."\n'
        section = extract_apply_section(text, find_match(text, "focus"))
        assert section == ApplySection(tagline="Aim first, then act.", action_items=())


class TestExtractTagline:
    """Test extract_tagline function."""

    @pytest.mark.parametrize(
        ("section", "expected"),
        [
            ('\n"Finish strong, then rest well."\n', "Finish strong, then rest well."),
            ("\nRemember: 'Finish strong, then rest well.'\n", "Finish strong, then rest well."),
            ("\n“Finish strong, then rest well.”\n", "Finish strong, then rest well."),
            ("\n*Finish strong, then rest well.*\n", "Finish strong, then rest well."),
            ("\nFinish strong and then rest well.\n", "Finish strong and then rest well."),
        ],
        ids=["double-quoted", "single-quoted", "smart-quoted", "asterisk", "standalone"],
    )
    def test_patterns(self, section: str, expected: str) -> None:
        assert extract_tagline(section) == expected

    def test_priority_order(self) -> None:
        """Test a double-quoted tagline wins over an asterisk-emphasized one."""
        section = '\n*Emphasized but second choice.*\n"Quoted and chosen first."\n'
        assert extract_tagline(section) == "Quoted and chosen first."

    def test_apostrophes_are_not_quotes(self) -> None:
        assert extract_tagline("you don't stop until it's done") == ""

    def test_rejects_short_quote(self) -> None:
        assert extract_tagline('\n"Go."\n') == ""


class TestExtractActionItems:
    """Test extract_action_items function."""

    def test_bullets(self) -> None:
        section = (
            "\n• Schedule your hardest task for the hour you have the most energy.\n"
            "• Celebrate small wins with the people who helped you get there.\n"
        )
        assert extract_action_items(section) == [
            "Schedule your hardest task for the hour you have the most energy.",
            "Celebrate small wins with the people who helped you get there.",
        ]

    def test_numbered(self) -> None:
        section = (
            "\n1. Schedule your hardest task for the hour you have the most energy.\n"
            "2) Celebrate small wins with the people who helped you get there.\n"
        )
        assert extract_action_items(section) == [
            "Schedule your hardest task for the hour you have the most energy.",
            "Celebrate small wins with the people who helped you get there.",
        ]

    def test_action_verb_fallback(self) -> None:
        """Test directive sentences are used when there are no list markers."""
        section = (
            "\nConsider pairing with someone who loves detail so plans get finished.\n"
            "Try writing your goals where you can see them every day.\n"
        )
        assert extract_action_items(section) == [
            "Consider pairing with someone who loves detail so plans get finished.",
            "Try writing your goals where you can see them every day.",
        ]

    def test_fallback_tops_up_list_items(self) -> None:
        section = (
            "\n- Schedule your hardest task for the hour you have the most energy.\n"
            "Seek out mentors who have finished projects like the one you are starting.\n"
        )
        assert extract_action_items(section) == [
            "Schedule your hardest task for the hour you have the most energy.",
            "Seek out mentors who have finished projects like the one you are starting.",
        ]

    def test_short_items_rejected(self) -> None:
        assert extract_action_items("\n- Rest.\n- Plan.\n") == []
