"""Shared pytest fixtures for Orchestra tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from orchestra.logging import ROOT_LOGGER


@pytest.fixture
def token_document() -> dict[str, Any]:
    """A small document with a mode-nested primitives group and two brands."""
    return {
        "Primitives": {
            "Mode 1": {
                "color": {
                    "blue": {"500": {"value": "#0055FF", "type": "color"}},
                    "white": {"value": "#FFFFFF", "type": "color"},
                },
                "space": {"md": {"value": "16px", "type": "dimension"}},
            },
            "Mode 2": {
                "color": {
                    "blue": {"500": {"value": "#001133", "type": "color"}},
                    "white": {"value": "#EEEEEE", "type": "color"},
                },
                "space": {"md": {"value": "20px", "type": "dimension"}},
            },
        },
        "Brand Components": {
            "Acme": {
                "button": {
                    "background": {"value": "{color/blue/500}", "type": "color"},
                    "text": {"value": "{color.white}", "type": "color"},
                    "padding": {"value": "{space/md}", "type": "dimension"},
                }
            },
            "Globex Corp": {
                "button": {
                    "background": {"value": "#FF0000", "type": "color"},
                    "radius": {"value": 4, "type": "number"},
                }
            },
        },
    }


@pytest.fixture
def write_tokens():
    """Write a token document to ``<root>/tokens/design-tokens.json``."""

    def _write(root: Path, document: dict[str, Any]) -> Path:
        path = root / "tokens" / "design-tokens.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project(tmp_path: Path, token_document: dict[str, Any], write_tokens) -> Path:
    """A project directory holding the sample token document."""
    write_tokens(tmp_path, token_document)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_orchestra_logger():
    """Drop handlers installed by ``setup_logging`` so streams don't leak between tests."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
