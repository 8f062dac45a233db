"""
Entry-point modules must import in a fresh interpreter, whatever order
the packages are first touched in.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).parent.parent / "src"


@pytest.mark.parametrize("module", [
    "main",
    "utils",
    "utils.logger",
    "engine.frame_scheduler",
    "models.color",
    "services",
    "managers",
])
def test_module_imports_cleanly(module):
    env = dict(os.environ, PYTHONPATH=str(SRC))
    result = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        env=env,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
