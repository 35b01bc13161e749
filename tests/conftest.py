from __future__ import annotations

from pathlib import Path

import pytest

from linefit.fonts import TrueType

from .common import build_font


def pytest_addoption(parser):
    parser.addoption(
        "--runslow", action="store_true", default=False, help="run slow tests"
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        # --runslow given in cli: do not skip slow tests
        return
    skip_slow = pytest.mark.skip(reason="need --runslow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(scope="session")
def ttf_path(tmp_path_factory) -> Path:
    return build_font(
        tmp_path_factory.mktemp("fonts") / "LinefitTest-Regular.ttf"
    )


@pytest.fixture(scope="session")
def truetype(ttf_path) -> TrueType:
    return TrueType.load(ttf_path, size=10)
