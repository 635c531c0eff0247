"""Saving chore lists to an Apple Note."""

from collections.abc import Sequence
from datetime import date
from pathlib import Path
from string import Template

from choredist import applescript
from choredist.errors import NotificationError
from choredist.models import Person
from choredist.output import format_note_html, format_note_plain
from choredist.templates import build_person_context, render_template_file

# The note's first <div> is its title. New entries go right below it so the
# most recent distribution is always at the top.
UPDATE_SCRIPT = Template("""
tell application "Notes"
    set noteName to "$note_name"
    set newContent to "$content"
    set titleHTML to "<div>" & noteName & "</div>"

    set noteExists to false
    try
        set targetNote to note noteName of default account
        set noteExists to true
    end try

    if noteExists then
        set currentBody to body of targetNote
        set oldContent to ""
        try
            set divEnd to offset of "</div>" in currentBody
            if divEnd > 0 then
                set oldContent to text (divEnd + 6) thru -1 of currentBody
            end if
        end try
        set body of targetNote to titleHTML & newContent & oldContent
    else
        tell default account
            make new note with properties {body:(titleHTML & newContent)}
        end tell
    end if
end tell
""")


class NoteWriter:
    """Prepends each distribution to a running Apple Note."""

    def __init__(
        self,
        note_name: str,
        dry_run: bool = False,
        template_path: Path | None = None,
    ):
        self.note_name = note_name
        self.dry_run = dry_run
        self.template_path = template_path

    def format_content(
        self,
        people: Sequence[Person],
        verbose: bool = False,
        day: date | None = None,
    ) -> tuple[str, str]:
        """Return (html, plain) note content."""
        if self.template_path is not None:
            # Template output is used as-is for both forms
            content = "".join(
                render_template_file(self.template_path, build_person_context(p, verbose))
                for p in people
            )
            return content, content
        return format_note_html(people, verbose, day), format_note_plain(people, verbose, day)

    def prepend_chore_list(self, people: Sequence[Person], verbose: bool = False) -> None:
        if not applescript.is_supported() and not self.dry_run:
            raise NotificationError("Apple Notes is only supported on macOS")

        html_content, plain_content = self.format_content(people, verbose)

        if self.dry_run:
            print(f"\n--- Would insert into note '{self.note_name}' ---\n{plain_content}")
            return

        update_note(self.note_name, html_content)
        print(f"✓ Added chore list to note '{self.note_name}'")


def update_note(note_name: str, content: str) -> None:
    script = UPDATE_SCRIPT.substitute(
        note_name=applescript.quote(note_name),
        content=applescript.quote(content),
    )
    applescript.run_script(script)
