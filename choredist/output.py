"""Output formatting for choredist."""

import html
from collections.abc import Sequence
from datetime import date

from choredist.models import Chore, Person


def _chore_label(chore: Chore, verbose: bool) -> str:
    if verbose:
        return f"{chore.name} (Difficulty: {chore.difficulty}, Earns: ${chore.earned})"
    return f"{chore.name} (Earns: ${chore.earned})"


def _format_note_date(day: date | None) -> str:
    day = day or date.today()
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


def format_distribution(people: Sequence[Person], verbose: bool = False) -> str:
    """Format the chore distribution for display."""
    lines: list[str] = ["", "=== Chore Distribution ===", ""]

    for person in people:
        header = person.name
        if verbose and person.effort_capacity > 0:
            header += f" (Effort Capacity: {person.effort_capacity})"
        lines.append(f"{header}:")

        lines.append("  Chores:")
        for chore in person.all_chores:
            lines.append(f"    - {_chore_label(chore, verbose)}")
            if chore.description:
                lines.append(f"      {chore.description}")

        if verbose:
            difficulty = f"  Total Difficulty: {person.total_difficulty}"
            if person.effort_capacity > 0:
                difficulty += f" / {person.effort_capacity}"
            lines.append(difficulty)
        lines.append(f"  Total Earned: ${person.total_earned}")
        lines.append("")

    return "\n".join(lines) + "\n"


def format_unassigned(chores: Sequence[Chore]) -> str:
    """Summarize chores that could not be placed."""
    if not chores:
        return ""
    names = ", ".join(c.name for c in chores)
    return f"Unassigned chores ({len(chores)}): {names}"


def format_message(person: Person, verbose: bool = False) -> str:
    """Default iMessage body for one person."""
    lines: list[str] = [f"Hi {person.name}! Here are your chores:", ""]

    for chore in person.all_chores:
        lines.append(f"• {_chore_label(chore, verbose)}")
        if chore.description:
            lines.append(f"  {chore.description}")

    lines.append("")
    lines.append(f"Total: ${person.total_earned}")
    if verbose and person.effort_capacity > 0:
        lines.append(f"Effort: {person.total_difficulty} / {person.effort_capacity}")

    return "\n".join(lines)


def _note_person_header(person: Person, verbose: bool) -> str:
    if verbose and person.effort_capacity > 0:
        return f"{person.name} (Capacity: {person.effort_capacity})"
    return person.name


def _note_chore_label(chore: Chore, verbose: bool) -> str:
    if verbose:
        return _chore_label(chore, verbose)
    return f"{chore.name} — ${chore.earned}"


def _note_total(person: Person, verbose: bool) -> str:
    if verbose and person.effort_capacity > 0:
        return (
            f"Total: ${person.total_earned} | "
            f"Effort: {person.total_difficulty} / {person.effort_capacity}"
        )
    return f"Total: ${person.total_earned}"


def format_note_plain(
    people: Sequence[Person],
    verbose: bool = False,
    day: date | None = None,
) -> str:
    """Plain-text note entry, used for dry-run previews."""
    lines: list[str] = [f"═══ {_format_note_date(day)} ═══", ""]

    for person in people:
        lines.append(_note_person_header(person, verbose))
        for chore in person.all_chores:
            lines.append(f"  • {_note_chore_label(chore, verbose)}")
            if chore.description:
                lines.append(f"    {chore.description}")
        lines.append(f"  {_note_total(person, verbose)}")
        lines.append("")

    lines.append("────────────────────────")
    return "\n".join(lines) + "\n"


def format_note_html(
    people: Sequence[Person],
    verbose: bool = False,
    day: date | None = None,
) -> str:
    """HTML note entry in the markup Apple Notes stores note bodies in."""
    esc = html.escape
    parts: list[str] = [f"<div><b>{esc(_format_note_date(day))}</b></div>", "<div><br></div>"]

    for person in people:
        header = f"<b>{esc(person.name)}</b>"
        if verbose and person.effort_capacity > 0:
            header += f" (Capacity: {person.effort_capacity})"
        parts.append(f"<div>{header}</div>")

        for chore in person.all_chores:
            parts.append(f"<div>• {esc(_note_chore_label(chore, verbose))}</div>")
            if chore.description:
                parts.append(
                    '<div style="padding-left: 20px; color: #666;">'
                    f"{esc(chore.description)}</div>"
                )

        parts.append(f"<div>{esc(_note_total(person, verbose))}</div>")
        parts.append("<div><br></div>")

    parts.append("<div>─────────────────────</div>")
    parts.append("<div><br></div>")
    return "".join(parts)
