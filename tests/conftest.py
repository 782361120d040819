from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def stackmix_home(tmp_path: Path):
    """Redirect ~/.stackmix and ./.stackmix into tmp_path."""
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    with (
        patch("pathlib.Path.home", return_value=home),
        patch("pathlib.Path.cwd", return_value=project),
    ):
        yield tmp_path
