"""
Pytest configuration and shared fixtures.

Every test runs in its own working directory with an isolated XDG config
home, no GPEID_* variables and an empty config cache, so user and project
configuration on the developer machine never leaks into results.
"""

import os
from pathlib import Path

import pytest

from gpeid.core.config import clear_cache

# ==============================================================================
# Sample gpEIDs
# ==============================================================================

VALID_GPEIDS = [
    "=Gebäude1+HLK_Sensor.001:Siemens.ABC123",
    "=Building.Floor2.Room3+HLK.VEN.TMP_Controller.042:Honeywell.T6Pro",
    "=Site1..Room5+TBD.HLK_TBD.TBD.005:TBD.TBD",
    "=Haus+HLK_Sensor.001:Siemens.Model-Config.v1$Serial.12345|Test.abc",
    "=Building+HLK.ABC_Sensor.001:Vendor.Product",
    "=Büro.Süd+HLK_Wärme.001:Müller.Gerät",
]

INVALID_GPEIDS = [
    "=Building+HLK_123.001:Vendor.Product",
    "=Building+hlk_Sensor.001:Vendor.Product",
    "=Building+HLK_Sensor.000:Vendor.Product",
    "=Building+HLK_Sensor.99:Vendor.Product",
    "=TBD+HLK_Sensor.001:Vendor.Product",
    "=Building+HLK_Sensor.001:Vendor",
    "Building+HLK_Sensor.001:Vendor.Product",
]


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Isolate config files, GPEID_* variables and the config cache."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for key in list(os.environ):
        if key.startswith("GPEID_"):
            monkeypatch.delenv(key)

    clear_cache()
    yield workdir
    clear_cache()


@pytest.fixture
def valid_gpeids() -> list[str]:
    """Well-formed gpEIDs covering every component."""
    return list(VALID_GPEIDS)


@pytest.fixture
def invalid_gpeids() -> list[str]:
    """One malformed gpEID per common mistake."""
    return list(INVALID_GPEIDS)


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """
    Provide a directory of documents mentioning gpEIDs.

    Creates:
    - equipment.md (one valid, one invalid gpEID)
    - notes.txt (one valid gpEID)
    - script.py (an invalid gpEID, but not a checked extension)
    """
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "equipment.md").write_text(
        "# Equipment\n"
        "\n"
        "- Sensor: =Gebäude1+HLK_Sensor.001:Siemens.ABC123\n"
        "- Broken: =Building+HLK_Sensor.000:Vendor.Product; see ticket\n",
        encoding="utf-8",
    )
    (docs / "notes.txt").write_text(
        "Controller =Building.Floor2.Room3+HLK.VEN.TMP_Controller.042:Honeywell.T6Pro\n",
        encoding="utf-8",
    )
    (docs / "script.py").write_text(
        'TAG = " =TBD+HLK_Sensor.001:Vendor.Product"\n',
        encoding="utf-8",
    )
    return docs
