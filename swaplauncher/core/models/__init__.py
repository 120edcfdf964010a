"""
Domain models — Pydantic types for the launcher.

All models are re-exported here for convenient access:

    from swaplauncher.core.models import Platform, Scenario, Action, Receipt, Outcome
"""

from swaplauncher.core.models.action import Action, Receipt
from swaplauncher.core.models.outcome import Outcome
from swaplauncher.core.models.platform import Platform, PlatformId
from swaplauncher.core.models.scenario import SCENARIOS, Scenario, get_scenario

__all__ = [
    # action.py
    "Action",
    "Receipt",
    # outcome.py
    "Outcome",
    # platform.py
    "Platform",
    "PlatformId",
    # scenario.py
    "SCENARIOS",
    "Scenario",
    "get_scenario",
]
