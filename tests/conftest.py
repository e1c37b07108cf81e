from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from extratos.models import Genre, Invoice, Performance, Play  # noqa: E402


@pytest.fixture
def plays() -> dict[str, Play]:
    return {
        "hamlet": Play("Hamlet", Genre.TRAGEDY, 4024),
        "as-like": Play("As You Like It", Genre.COMEDY, 2670),
        "othello": Play("Othello", Genre.TRAGEDY, 3560),
    }


@pytest.fixture
def invoice() -> Invoice:
    return Invoice(
        "BigCo",
        (
            Performance("hamlet", 55),
            Performance("as-like", 35),
            Performance("othello", 40),
        ),
    )


@pytest.fixture(autouse=True)
def _reset_extratos_logger():
    yield
    logger = logging.getLogger("extratos")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
