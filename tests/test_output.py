"""Tests for output formatting."""

from datetime import date

import pytest

from choredist.models import Chore, Person
from choredist.output import (
    format_distribution,
    format_message,
    format_note_html,
    format_note_plain,
    format_unassigned,
)


@pytest.fixture
def people() -> list[Person]:
    alice = Person(
        name="Alice",
        effort_capacity=10,
        pre_assigned_chores=[Chore(name="Feed the cat", difficulty=1, earned=1)],
    )
    alice.reset_to_baseline()
    alice.assign(Chore(name="Kitchen", difficulty=6, earned=5, description="Wipe counters"))

    bob = Person(name="Bob")
    bob.assign(Chore(name="Bathroom", difficulty=5, earned=4))
    return [alice, bob]


class TestFormatDistribution:
    """Golden output for the distribution report."""

    def test_default(self, people) -> None:
        expected = (
            "\n"
            "=== Chore Distribution ===\n"
            "\n"
            "Alice:\n"
            "  Chores:\n"
            "    - Feed the cat (Earns: $1)\n"
            "    - Kitchen (Earns: $5)\n"
            "      Wipe counters\n"
            "  Total Earned: $6\n"
            "\n"
            "Bob:\n"
            "  Chores:\n"
            "    - Bathroom (Earns: $4)\n"
            "  Total Earned: $4\n"
            "\n"
        )

        assert format_distribution(people) == expected

    def test_verbose(self, people) -> None:
        expected = (
            "\n"
            "=== Chore Distribution ===\n"
            "\n"
            "Alice (Effort Capacity: 10):\n"
            "  Chores:\n"
            "    - Feed the cat (Difficulty: 1, Earns: $1)\n"
            "    - Kitchen (Difficulty: 6, Earns: $5)\n"
            "      Wipe counters\n"
            "  Total Difficulty: 7 / 10\n"
            "  Total Earned: $6\n"
            "\n"
            "Bob:\n"
            "  Chores:\n"
            "    - Bathroom (Difficulty: 5, Earns: $4)\n"
            "  Total Difficulty: 5\n"
            "  Total Earned: $4\n"
            "\n"
        )

        assert format_distribution(people, verbose=True) == expected

    def test_person_without_chores(self) -> None:
        text = format_distribution([Person(name="Carol")])

        assert "Carol:\n  Chores:\n  Total Earned: $0\n" in text

    def test_is_deterministic(self, people) -> None:
        assert format_distribution(people, True) == format_distribution(people, True)


class TestFormatUnassigned:
    def test_lists_names(self) -> None:
        text = format_unassigned([Chore(name="Big"), Chore(name="Huge")])

        assert text == "Unassigned chores (2): Big, Huge"

    def test_empty(self) -> None:
        assert format_unassigned([]) == ""


class TestFormatMessage:
    """Tests for the default iMessage body."""

    def test_default(self, people) -> None:
        message = format_message(people[0])

        assert message.startswith("Hi Alice! Here are your chores:")
        assert "• Feed the cat (Earns: $1)" in message
        assert "• Kitchen (Earns: $5)\n  Wipe counters" in message
        assert message.endswith("Total: $6")
        assert "Difficulty:" not in message
        assert "Effort:" not in message

    def test_verbose_with_capacity(self, people) -> None:
        message = format_message(people[0], verbose=True)

        assert "Difficulty: 6" in message
        assert message.endswith("Effort: 7 / 10")

    def test_verbose_without_capacity(self, people) -> None:
        message = format_message(people[1], verbose=True)

        assert "Difficulty: 5" in message
        assert "Effort:" not in message


class TestFormatNote:
    """Tests for note entries."""

    def test_plain(self, people) -> None:
        text = format_note_plain(people, day=date(2024, 3, 4))

        assert text.startswith("═══ Monday, March 4, 2024 ═══\n\n")
        assert "Alice\n  • Feed the cat — $1\n  • Kitchen — $5\n    Wipe counters\n" in text
        assert "  Total: $6\n" in text
        assert text.endswith("────────────────────────\n")

    def test_plain_verbose(self, people) -> None:
        text = format_note_plain(people, verbose=True, day=date(2024, 3, 4))

        assert "Alice (Capacity: 10)\n" in text
        assert "Total: $6 | Effort: 7 / 10" in text
        assert "Bob\n" in text

    def test_html_escapes_names(self, people) -> None:
        people[1].name = "Bob <Jr>"

        markup = format_note_html(people, day=date(2024, 3, 4))

        assert markup.startswith("<div><b>Monday, March 4, 2024</b></div>")
        assert "<div><b>Bob &lt;Jr&gt;</b></div>" in markup
        assert '<div style="padding-left: 20px; color: #666;">Wipe counters</div>' in markup
        assert "<div>Total: $6</div>" in markup
