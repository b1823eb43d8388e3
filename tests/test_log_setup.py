"""Tests for root logger configuration (cli/log_setup.py).

The root logger is replaced by a private ``Logger`` so pytest's own
capture handlers never leak into the assertions.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from suiup.cli.log_setup import setup_logging


def test_noop_when_root_has_handlers() -> None:
    root = logging.Logger("root-with-handler")
    root.addHandler(logging.NullHandler())

    with patch("logging.getLogger", return_value=root):
        with patch("logging.basicConfig") as mock_basic:
            with patch("suiup.cli.log_setup._build_handler") as mock_build:
                setup_logging(verbose=True)

    mock_build.assert_not_called()
    mock_basic.assert_not_called()


@pytest.mark.parametrize(("verbose", "level"), [(True, logging.DEBUG), (False, logging.WARNING)])
def test_configures_bare_root(verbose: bool, level: int) -> None:
    handler = logging.NullHandler()

    with patch("logging.getLogger", return_value=logging.Logger("bare-root")):
        with patch("logging.basicConfig") as mock_basic:
            with patch("suiup.cli.log_setup._build_handler", return_value=handler):
                setup_logging(verbose=verbose)

    mock_basic.assert_called_once_with(level=level, format="%(message)s", handlers=[handler])
