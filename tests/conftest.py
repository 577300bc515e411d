from pathlib import Path
import textwrap

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "proj"
    path.mkdir()
    return path


@pytest.fixture
def docs_config(tmp_path: Path) -> Path:
    """
    Write a small defaults file overriding the jazzy author and theme.
    """
    config_text = textwrap.dedent(
        """
        [docs]
        author = "Config Author"
        theme = "apple"
        """
    ).strip()
    path = tmp_path / "github-workflows.toml"
    path.write_text(config_text + "\n", encoding="utf-8")
    return path
