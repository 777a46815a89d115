from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from reactorplanner import BuildOutcomeSet, ProvenanceArena
from reactorplanner.logging_utils import LEVEL_DEFAULT, set_log_level

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def reset_log_level() -> Iterator[None]:
    set_log_level(LEVEL_DEFAULT)
    yield
    set_log_level(LEVEL_DEFAULT)


@pytest.fixture
def outcomes() -> BuildOutcomeSet:
    return BuildOutcomeSet()


@pytest.fixture
def arena() -> ProvenanceArena:
    return ProvenanceArena()
