"""Test suite package configuration.

This module ensures that the repository root is available on ``sys.path`` when
running the test suite, so ``import rsapi`` works even when :mod:`pytest` is
invoked through its console script without an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path

_REPO_ROOT: Path = Path(__file__).resolve().parent.parent


def _ensure_repo_on_path() -> None:
    """Insert the repository root to ``sys.path`` when it is missing.

    The helper performs an ``insert`` instead of ``append`` so the local
    package shadows any installed copy of ``rsapi``.
    """

    repo_root_str: str = str(_REPO_ROOT)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


_ensure_repo_on_path()
