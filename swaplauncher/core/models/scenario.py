"""
Scenario model — the numbered entries of the test menu.

Four entries are integration scenarios against a live backend; each
one needs hand-edited variables in a test source file before it means
anything. The fifth runs the default unit-test set.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

BITCOIN_TEST_FILE = "src/swaps/bitcoin.rs"
LIQUID_TEST_FILE = "src/swaps/liquid.rs"


class Scenario(BaseModel):
    """One selectable menu entry."""

    model_config = ConfigDict(frozen=True)

    choice: int
    name: str            # test-runner filter; empty runs everything
    label: str
    path: str | None = None

    @property
    def requires_notice(self) -> bool:
        """Whether the user must confirm manual edits before running."""
        return self.path is not None

    @property
    def is_unit_tests(self) -> bool:
        return not self.name


SCENARIOS: tuple[Scenario, ...] = (
    Scenario(
        choice=1,
        name="bitcoin_submarine",
        label="Bitcoin submarine swap",
        path=BITCOIN_TEST_FILE,
    ),
    Scenario(
        choice=2,
        name="bitcoin_reverse_submarine",
        label="Bitcoin reverse submarine swap",
        path=BITCOIN_TEST_FILE,
    ),
    Scenario(
        choice=3,
        name="liquid_submarine",
        label="Liquid submarine swap",
        path=LIQUID_TEST_FILE,
    ),
    Scenario(
        choice=4,
        name="liquid_reverse_submarine",
        label="Liquid reverse submarine swap",
        path=LIQUID_TEST_FILE,
    ),
    Scenario(
        choice=5,
        name="",
        label="All unit tests",
    ),
)


def get_scenario(choice: int) -> Scenario | None:
    """Look up a scenario by its menu number."""
    for scenario in SCENARIOS:
        if scenario.choice == choice:
            return scenario
    return None
