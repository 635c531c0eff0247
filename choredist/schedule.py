"""Weekly automatic distribution through a macOS launchd agent."""

import plistlib
import subprocess
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from choredist.const import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_NOTE_NAME,
    LAUNCH_AGENT_LABEL,
    LOGGER,
    WEEKDAY_NAMES,
)
from choredist.errors import ScheduleError

InputFn = Callable[[str], str]


@dataclass
class ScheduleSettings:
    """When and how the scheduled distribution runs."""

    weekday: int  # 0 = Sunday, as launchd counts
    hour: int
    minute: int
    config_path: str = DEFAULT_CONFIG_PATH
    send_sms: bool = False
    note_name: str | None = None


def is_supported() -> bool:
    return sys.platform == "darwin"


def launch_agent_path(home: Path | None = None) -> Path:
    home = home or Path.home()
    return home / "Library" / "LaunchAgents" / f"{LAUNCH_AGENT_LABEL}.plist"


def log_directory(home: Path | None = None) -> Path:
    home = home or Path.home()
    return home / "Library" / "Logs" / "choredist"


def weekday_name(weekday: int) -> str:
    if 0 <= weekday < len(WEEKDAY_NAMES):
        return WEEKDAY_NAMES[weekday]
    return str(weekday)


def program_arguments(settings: ScheduleSettings) -> list[str]:
    """Command line launchd runs, pinned to the current interpreter."""
    args = [
        sys.executable,
        "-m",
        "choredist.cli",
        "distribute",
        "--config",
        str(Path(settings.config_path).expanduser().resolve()),
    ]
    if settings.send_sms:
        args.append("--sms")
    if settings.note_name:
        args.extend(["--note", settings.note_name])
    return args


def build_plist(settings: ScheduleSettings, log_dir: Path) -> bytes:
    """Build the launchd agent definition."""
    agent = {
        "Label": LAUNCH_AGENT_LABEL,
        "ProgramArguments": program_arguments(settings),
        "StartCalendarInterval": {
            "Weekday": settings.weekday,
            "Hour": settings.hour,
            "Minute": settings.minute,
        },
        "StandardOutPath": str(log_dir / "stdout.log"),
        "StandardErrorPath": str(log_dir / "stderr.log"),
        "RunAtLoad": False,
    }
    return plistlib.dumps(agent)


def _prompt_int(input_fn: InputFn, prompt: str, low: int, high: int) -> int:
    while True:
        raw = input_fn(prompt).strip()
        try:
            value = int(raw)
        except ValueError:
            value = None
        if value is not None and low <= value <= high:
            return value
        print(f"Invalid input. Please enter a number between {low} and {high}.")


def _prompt_yes(input_fn: InputFn, prompt: str) -> bool:
    return input_fn(prompt).strip().lower() in ("y", "yes")


def prompt_schedule_settings(input_fn: InputFn = input) -> ScheduleSettings:
    """Interactively ask for the schedule."""
    print("=== choredist Scheduling Setup ===")
    print("Select day of week:")
    for idx, name in enumerate(WEEKDAY_NAMES):
        print(f"  {idx} - {name}")

    weekday = _prompt_int(input_fn, "\nEnter day (0-6): ", 0, 6)
    hour = _prompt_int(input_fn, "\nEnter hour (0-23, e.g., 10 for 10 AM): ", 0, 23)
    minute = _prompt_int(input_fn, "Enter minute (0-59): ", 0, 59)

    config_path = input_fn(
        f"\nEnter config file path (press Enter for '{DEFAULT_CONFIG_PATH}'): "
    ).strip()
    send_sms = _prompt_yes(input_fn, "\nSend iMessage notifications? (y/n): ")

    note_name = None
    if _prompt_yes(input_fn, "Save to Apple Notes? (y/n): "):
        note_name = (
            input_fn(f"Enter note name (default: '{DEFAULT_NOTE_NAME}'): ").strip()
            or DEFAULT_NOTE_NAME
        )

    return ScheduleSettings(
        weekday=weekday,
        hour=hour,
        minute=minute,
        config_path=config_path or DEFAULT_CONFIG_PATH,
        send_sms=send_sms,
        note_name=note_name,
    )


def launchctl(*args: str, check: bool = True) -> str:
    try:
        completed = subprocess.run(
            ["launchctl", *args],
            capture_output=True,
            text=True,
            check=check,
        )
    except (OSError, subprocess.CalledProcessError) as err:
        raise ScheduleError(f"launchctl {' '.join(args)} failed: {err}") from err
    return completed.stdout


def _require_macos() -> None:
    if not is_supported():
        raise ScheduleError("Automatic scheduling is only supported on macOS")


def install(settings: ScheduleSettings, home: Path | None = None) -> Path:
    """Write and load the launchd agent, replacing any existing one."""
    _require_macos()
    plist_path = launch_agent_path(home)
    log_dir = log_directory(home)

    try:
        plist_path.parent.mkdir(parents=True, exist_ok=True)
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise ScheduleError(f"error creating directories: {err}") from err

    if plist_path.exists():
        print("\nSchedule already exists. Unloading existing configuration...")
        launchctl("unload", str(plist_path), check=False)

    try:
        plist_path.write_bytes(build_plist(settings, log_dir))
    except OSError as err:
        raise ScheduleError(f"error writing plist file: {err}") from err
    print(f"\n✓ Created schedule configuration at: {plist_path}")

    launchctl("load", str(plist_path))
    LOGGER.info("Loaded launch agent %s", LAUNCH_AGENT_LABEL)
    print("✓ Schedule loaded successfully")
    print(
        f"\nScheduled to run: {weekday_name(settings.weekday)} at "
        f"{settings.hour:02d}:{settings.minute:02d}"
    )
    print(f"Logs will be written to: {log_dir}")
    return plist_path


def uninstall(home: Path | None = None, input_fn: InputFn = input) -> bool:
    """Unload and remove the agent. Returns False if nothing was removed."""
    _require_macos()
    plist_path = launch_agent_path(home)
    if not plist_path.exists():
        print("No schedule is currently installed.")
        return False

    if not _prompt_yes(input_fn, "Are you sure you want to remove the schedule? (y/n): "):
        print("Cancelled.")
        return False

    try:
        launchctl("unload", str(plist_path))
    except ScheduleError as err:
        LOGGER.warning("Failed to unload schedule: %s", err)

    try:
        plist_path.unlink()
    except OSError as err:
        raise ScheduleError(f"error removing plist file: {err}") from err

    print("✓ Schedule removed successfully")
    return True


def read_schedule(plist_path: Path) -> dict:
    try:
        with plist_path.open("rb") as f:
            return plistlib.load(f)
    except (OSError, plistlib.InvalidFileException) as err:
        raise ScheduleError(f"error reading schedule configuration: {err}") from err


def status(home: Path | None = None) -> bool:
    """Print the installed schedule. Returns whether one is installed."""
    _require_macos()
    plist_path = launch_agent_path(home)
    if not plist_path.exists():
        print("Status: Not scheduled")
        print("\nRun 'choredist schedule install' to set up automatic scheduling.")
        return False

    print("Status: Scheduled")
    print(f"Configuration file: {plist_path}\n")

    interval = read_schedule(plist_path).get("StartCalendarInterval", {})
    print("Schedule Details:")
    if "Weekday" in interval:
        print(f"  Day: {weekday_name(interval['Weekday'])}")
    if "Hour" in interval:
        print(f"  Hour: {interval['Hour']}")
    if "Minute" in interval:
        print(f"  Minute: {interval['Minute']}")

    if LAUNCH_AGENT_LABEL in launchctl("list", check=False):
        print("\n✓ Agent is loaded and active")
    else:
        print("\n⚠ Agent is not currently loaded")
        print(f"Run: launchctl load {plist_path}")

    print(f"\nLogs: {log_directory(home)}")
    return True


def run_now(home: Path | None = None) -> bool:
    """Trigger the scheduled job once."""
    _require_macos()
    if not launch_agent_path(home).exists():
        print("No schedule is currently installed.")
        print("Run 'choredist schedule install' first.")
        return False

    print("Running scheduled task now...")
    launchctl("start", LAUNCH_AGENT_LABEL)
    print("✓ Task started")

    log_dir = log_directory(home)
    print("\nCheck logs for output:")
    print(f"  tail -f {log_dir / 'stdout.log'}")
    print(f"  tail -f {log_dir / 'stderr.log'}")
    return True
