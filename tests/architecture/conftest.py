"""Fixtures describing checkgate's import layers for pytestarch."""

from pathlib import Path

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)

SRC_DIR = Path(__file__).resolve().parents[2] / "src"
PACKAGE_DIR = SRC_DIR / "checkgate"


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    """Import graph of the checkgate package."""
    return get_evaluable_architecture(str(SRC_DIR), str(PACKAGE_DIR))


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """Barrier layers, innermost first.

    - domain: completion results, trace events and the loader/scheduler ports
    - application: the Barrier and its event emitter
    - infrastructure: asyncio and manual schedulers, HTTP and mock loaders,
      event store, loader registry

    Module names are relative to SRC_DIR's parent, hence the 'src.' prefix.
    """
    return (
        LayeredArchitecture()
        .layer("domain")
        .containing_modules(["src.checkgate.domain"])
        .layer("application")
        .containing_modules(["src.checkgate.application"])
        .layer("infrastructure")
        .containing_modules(["src.checkgate.infrastructure"])
    )
