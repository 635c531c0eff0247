"""Running AppleScript through osascript (macOS only)."""

import subprocess
import sys

from choredist.errors import NotificationError


def is_supported() -> bool:
    return sys.platform == "darwin"


def quote(text: str) -> str:
    """Escape text for use inside an AppleScript string literal."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def run_script(script: str) -> str:
    """Run an AppleScript and return its output."""
    try:
        completed = subprocess.run(
            ["osascript", "-e", script],
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as err:
        raise NotificationError("osascript not found; AppleScript requires macOS") from err
    except subprocess.CalledProcessError as err:
        output = (err.stderr or err.stdout or "").strip()
        raise NotificationError(f"AppleScript error: {err}, output: {output}") from err
    return completed.stdout
