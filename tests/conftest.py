"""
Shared fixtures. Inserts the project `src/` onto sys.path so tests run
without installing the package.
"""

from __future__ import annotations

import pathlib
import sys

import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from sortkit.algorithms import all_sorters  # noqa: E402


@pytest.fixture(params=all_sorters(), ids=lambda s: s.name)
def sorter(request):
    return request.param
