"""Shared pytest fixtures and test helpers for aggregen tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
import pytest
from click.testing import CliRunner

from aggregen.config.models import AggConfig
from aggregen.domain.types import Connector, Point, Section
from aggregen.library.dictionary import Dictionary
from aggregen.library.loader import build_dictionary

X_PLUS = Connector("X", "+")
X_MINUS = Connector("X", "-")

# A hub with two X+ sockets; leaves close a socket, links extend the chain.
HUB_LEXIS: dict[str, Any] = {
    "poles": [["+", "-"]],
    "sections": [
        {"point": "hub", "connectors": [["X", "+"], ["X", "+"]]},
        {"point": "leaf", "weight": 3, "connectors": [["X", "-"]]},
        {"point": "link", "weight": 1, "connectors": [["X", "-"], ["X", "+"]]},
    ],
}

HUB_LEXIS_YAML = """\
poles:
  - ["+", "-"]
sections:
  - point: hub
    connectors: [[X, "+"], [X, "+"]]
  - point: leaf
    weight: 3
    connectors: [[X, "-"]]
  - point: link
    weight: 1
    connectors: [[X, "-"], [X, "+"]]
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so draws are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def hub_dictionary() -> Dictionary:
    return build_dictionary(HUB_LEXIS)


@pytest.fixture
def lexis_path(tmp_path: Path) -> Path:
    """YAML lexis file holding the hub/leaf/link library."""
    path = tmp_path / "lexis.yaml"
    path.write_text(HUB_LEXIS_YAML, encoding="utf-8")
    return path


@pytest.fixture
def config() -> AggConfig:
    return AggConfig.model_validate({"search": {"seed": 7, "max_solutions": 3}})


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory with no config discovery overrides."""
    monkeypatch.delenv("AGGREGEN_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_section(name: str, *connectors: Connector, weight: float | None = None) -> Section:
    """Build a library-style section."""
    return Section(point=Point(name), connectors=tuple(connectors), weight=weight)


def base_name(name: str) -> str:
    """Strip the unique suffix added when a section is materialized."""
    return name.split("@", 1)[0]
