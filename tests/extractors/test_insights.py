"""Tests for personalized insight extraction."""

from strengthslens.extractors.insights import extract_insights, split_insight_paragraphs

HEADER = "1. Input ®\nYou are inquisitive.\n\nWHY YOUR INPUT IS UNIQUE\n\n"


class TestSplitInsightParagraphs:
    """Test split_insight_paragraphs function."""

    def test_blank_lines_and_openers(self) -> None:
        """Test openers start a new paragraph even without a blank line."""
        section = "\n\nBy nature, you collect. Instinctively, you keep.\n\nThird part.\n"
        assert split_insight_paragraphs(section) == [
            "By nature, you collect.",
            "Instinctively, you keep.",
            "Third part.",
        ]

    def test_uppercase_openers_after_sentence_end(self) -> None:
        section = "BY NATURE, YOU COLLECT. INSTINCTIVELY, YOU KEEP.\n"
        assert split_insight_paragraphs(section) == [
            "BY NATURE, YOU COLLECT.",
            "INSTINCTIVELY, YOU KEEP.",
        ]

    def test_wrapped_lowercase_opener_stays_in_sentence(self) -> None:
        section = "You gather facts, and\nby nature you keep them.\n"
        assert split_insight_paragraphs(section) == [
            "You gather facts, and\nby nature you keep them."
        ]


class TestExtractInsights:
    """Test extract_insights function."""

    def test_opener_paragraphs(self, find_match) -> None:
        text = HEADER + (
            "Driven by your talents, you keep a collection of facts that few others have.\n\n"
            "It's very likely that you save articles, quotes and notes for later use.\n\n"
            "Because of your strengths, you can answer questions others find obscure.\n"
        )
        insights = extract_insights(text, find_match(text, "input"))
        assert insights == [
            "Driven by your talents, you keep a collection of facts that few others have.",
            "It's very likely that you save articles, quotes and notes for later use.",
            "Because of your strengths, you can answer questions others find obscure.",
        ]

    def test_all_caps_openers(self, find_match) -> None:
        """Test all-caps openers split paragraphs and use the shorter opener minimum."""
        text = HEADER + (
            "BY NATURE, YOU KEEP EVERY RECEIPT AND TICKET STUB. "
            "INSTINCTIVELY, YOU SAVE NOTES FOR LATER.\n"
        )
        insights = extract_insights(text, find_match(text, "input"))
        assert insights == [
            "BY NATURE, YOU KEEP EVERY RECEIPT AND TICKET STUB.",
            "INSTINCTIVELY, YOU SAVE NOTES FOR LATER.",
        ]

    def test_reader_addressed_fallback(self, find_match) -> None:
        """Test other paragraphs qualify when they address the reader at length."""
        text = HEADER + (
            "Your mind gathers facts, stories and objects that most people would overlook.\n\n"
            "Your desk is full.\n\n"
            "Museums hold many objects that curators have gathered over the centuries.\n"
        )
        insights = extract_insights(text, find_match(text, "input"))
        assert insights == [
            "Your mind gathers facts, stories and objects that most people would overlook."
        ]

    def test_trims_to_last_full_sentence(self, find_match) -> None:
        text = HEADER + "By nature, you keep every receipt and ticket stub. And then\n"
        insights = extract_insights(text, find_match(text, "input"))
        assert insights == ["By nature, you keep every receipt and ticket stub."]

    def test_deduplicates_and_caps_at_five(self, find_match) -> None:
        paragraphs = [f"By nature, you collect item number {n} with care." for n in range(7)]
        paragraphs.insert(1, paragraphs[0])
        text = HEADER + "\n\n".join(paragraphs) + "\n"

        insights = extract_insights(text, find_match(text, "input"))
        assert insights == paragraphs[:1] + paragraphs[2:6]

    def test_section_ends_at_next_header(self, find_match) -> None:
        text = HEADER + (
            "Chances are good that you keep a library of books you have not read yet.\n\n"
            "APPLY YOUR INPUT TO SUCCEED\n\n"
            "Instinctively, you will want to share what you find with other people.\n"
        )
        insights = extract_insights(text, find_match(text, "input"))
        assert insights == [
            "Chances are good that you keep a library of books you have not read yet."
        ]

    def test_missing_section(self, find_match) -> None:
        text = "1. Input ®\nYou are inquisitive and collect things.\n"
        assert extract_insights(text, find_match(text, "input")) == []
