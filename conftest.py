"""
Shared fixtures for the straps tests.
"""

from pathlib import Path

import pytest

SAMPLE_STRAPS = """<straps>
  <env name="dev">
    <strap key="CompanyName" value="NEWCO-DEV"/>
    <strap key="UseEmail" value="true"/>
  </env>
  <env name="prod">
    <strap key="CompanyName" value="NEWCO"/>
    <strap key="UseEmail" value="true"/>
    <strap key="ProdOnly" value="yes"/>
  </env>
</straps>
"""


def write_straps(directory: Path, content: str = SAMPLE_STRAPS) -> Path:
    """Write a straps.xml into ``directory`` and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "straps.xml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def clean_env(monkeypatch):
    """Remove the variables the loader reads from the process environment."""
    for name in ("STRAPS_HOME", "PROGRAM_ENV"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def workdir(tmp_path, clean_env):
    """An empty working directory the test runs in."""
    clean_env.chdir(tmp_path)
    return tmp_path
