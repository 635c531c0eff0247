"""iMessage notifications for chore assignments."""

from collections.abc import Sequence
from pathlib import Path

from choredist import applescript
from choredist.const import LOGGER
from choredist.errors import ChoreDistError, NotificationError
from choredist.models import Person
from choredist.output import format_message as format_default_message
from choredist.templates import build_person_context, render_template_file

SEND_SCRIPT = """
tell application "Messages"
    set targetService to 1st service whose service type = iMessage
    set targetBuddy to buddy "{contact}" of targetService
    send "{message}" to targetBuddy
end tell
"""


class MessageSender:
    """Sends each person their chore list through Messages."""

    def __init__(self, dry_run: bool = False, template_path: Path | None = None):
        self.dry_run = dry_run
        self.template_path = template_path

    def format_message(self, person: Person, verbose: bool = False) -> str:
        if self.template_path is not None:
            context = build_person_context(person, verbose)
            return render_template_file(self.template_path, context)
        return format_default_message(person, verbose)

    def send_chore_assignments(self, people: Sequence[Person], verbose: bool = False) -> None:
        """
        Message everyone who has a contact configured.

        Failures for individual people don't stop the others; they are
        collected and raised together once everyone has been tried.
        """
        if not applescript.is_supported() and not self.dry_run:
            raise NotificationError("iMessage is only supported on macOS")

        errors: list[str] = []
        for person in people:
            if not person.contact:
                print(f"Skipping {person.name}: no contact configured")
                continue

            try:
                message = self.format_message(person, verbose)
                if self.dry_run:
                    print(f"\n--- Would send to {person.name} ({person.contact}) ---\n{message}")
                    continue
                send_message(person.contact, message)
            except ChoreDistError as err:
                LOGGER.error("Failed to message %s: %s", person.name, err)
                errors.append(f"{person.name}: {err}")
                continue

            print(f"✓ Sent chores to {person.name} ({person.contact})")

        if errors:
            raise NotificationError(f"failed to send some messages: {'; '.join(errors)}")


def send_message(contact: str, message: str) -> None:
    script = SEND_SCRIPT.format(
        contact=applescript.quote(contact),
        message=applescript.quote(message),
    )
    applescript.run_script(script)
