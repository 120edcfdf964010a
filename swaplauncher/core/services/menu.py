"""Scenario menu — render the choices and resolve the user's pick."""

from __future__ import annotations

from swaplauncher.core.models.scenario import SCENARIOS, Scenario, get_scenario

MENU_TITLE = "Select a test to run:"


def render_menu() -> str:
    """The fixed five-entry menu, one line per scenario."""
    lines = [MENU_TITLE]
    lines.extend(f"{s.choice}. {s.label}" for s in SCENARIOS)
    return "\n".join(lines)


def resolve_choice(raw: str) -> Scenario | None:
    """Map raw menu input to a scenario.

    Only the literal digits 1 to 5 (surrounding whitespace ignored)
    select something; ``0``, ``6``, ``01``, ``one`` and friends do not.
    """
    raw = raw.strip()
    if len(raw) != 1 or raw not in "12345":
        return None
    return get_scenario(int(raw))
