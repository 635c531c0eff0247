"""Jinja2 templates for custom message and note bodies."""

from datetime import datetime
from pathlib import Path
from typing import Any

import jinja2

from choredist.const import LOGGER
from choredist.errors import TemplateRenderError
from choredist.models import Chore, Person


def _chore_context(chore: Chore) -> dict[str, Any]:
    return {
        "name": chore.name,
        "difficulty": chore.difficulty,
        "earned": float(chore.earned),
        "description": chore.description,
    }


def build_person_context(
    person: Person,
    verbose: bool = False,
    now: datetime | None = None,
) -> dict[str, Any]:
    """
    Build the variables available to a per-person template.

    Amounts are floats so the ``currency`` filter can show cents.
    """
    pre_assigned = [_chore_context(c) for c in person.pre_assigned_chores]
    distributed = [_chore_context(c) for c in person.chores]
    return {
        "person_name": person.name,
        "contact": person.contact,
        "date": now or datetime.now(),
        "pre_assigned_chores": pre_assigned,
        "distributed_chores": distributed,
        "all_chores": pre_assigned + distributed,
        "total_earned": float(person.total_earned),
        "total_difficulty": person.total_difficulty,
        "capacity": person.effort_capacity,
        "verbose": verbose,
    }


def currency(amount: float) -> str:
    return f"${amount:.2f}"


def format_date(value: datetime, fmt: str = "%Y-%m-%d") -> str:
    return value.strftime(fmt)


def pluralize(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def create_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        autoescape=False,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["currency"] = currency
    env.filters["date"] = format_date
    env.globals["pluralize"] = pluralize
    return env


def render_template(template_str: str, context: dict[str, Any]) -> str:
    """Render a template string with the given context."""
    try:
        template = create_environment().from_string(template_str)
        return template.render(**context)
    except jinja2.TemplateError as err:
        LOGGER.error("Template rendering failed: %s", err)
        raise TemplateRenderError(f"failed to render template: {err}") from err


def render_template_file(template_path: Path | str, context: dict[str, Any]) -> str:
    """Load a template from disk and render it."""
    template_path = Path(template_path)
    if not template_path.is_file():
        raise TemplateRenderError(f"template file not found: {template_path}")
    try:
        template_str = template_path.read_text(encoding="utf-8")
    except OSError as err:
        raise TemplateRenderError(f"failed to read template file: {err}") from err
    except UnicodeDecodeError as err:
        raise TemplateRenderError(f"template file is not valid UTF-8: {err}") from err
    return render_template(template_str, context)
