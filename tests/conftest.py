"""Shared pytest fixtures for solpragma tests."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any logging configuration a test (or the CLI) installed."""
    root = logging.getLogger()
    pkg = logging.getLogger("solpragma")
    handlers, level = root.handlers[:], root.level
    pkg_handlers = pkg.handlers[:]
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
    pkg.handlers[:] = pkg_handlers
    pkg.setLevel(logging.NOTSET)


@pytest.fixture
def sol_tree(tmp_path):
    """A small project: two contracts at the root, one nested, one non-source file."""
    (tmp_path / "Token.sol").write_text(
        "// SPDX-License-Identifier: MIT\npragma solidity ^0.8.20;\ncontract Token {}\n"
    )
    (tmp_path / "Legacy.sol").write_text("contract Legacy { function f() public {} }\n")
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "Math.sol").write_text('pragma solidity ">=0.7.0 <0.9.0";\nlibrary Math {}\n')
    (tmp_path / "README.md").write_text("pragma solidity ^0.1.0;\n")
    return tmp_path
