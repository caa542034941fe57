"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from cosacode.config import CosaCodeConfig

MESSY_CODE = (
    "import os\n"
    "import sys\n"
    "import os\n"
    "\n"
    "def list(items)\n"
    "   total = 0   \n"
    "   for x in items:\n"
    "       if x is 1:\n"
    "           total = eval('x')\n"
    "   try:\n"
    "       pass\n"
    "   except:\n"
    "       pass\n"
    "   return total\n"
    "   print(os.getcwd(]\n"
    "# TODO: tidy up\n"
    "unused = {'a': [1, 2}"
)


@pytest.fixture
def messy_code() -> str:
    return MESSY_CODE


@pytest.fixture
def clean_code() -> str:
    return (
        "import os\n"
        "\n"
        "\n"
        "def cwd_name():\n"
        "    path = os.getcwd()\n"
        "    return path\n"
    )


@pytest.fixture
def config() -> CosaCodeConfig:
    return CosaCodeConfig()


@pytest.fixture
def project_dir(tmp_path: Path, clean_code: str, messy_code: str) -> Path:
    (tmp_path / "clean.py").write_text(clean_code)
    pkg = tmp_path / "pkg"
    pkg.mkdir()
    (pkg / "messy.py").write_text(messy_code)
    (pkg / "notes.txt").write_text("not python at all")
    return tmp_path
