from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against missing and corrupted config files.
3. Save/Load only at the path the caller names.
4. Importing the module leaves the home directory untouched.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

from cheattable2csv.domain.config import get_default_config, load_config, save_config
from cheattable2csv.domain.constants import CURRENT_CONFIG_VERSION


def test_default_config_values():
    cfg = get_default_config()

    assert cfg["input_path"] == "data/person-player.xml"
    assert cfg["output_path"] == "output/cheat_table.csv"
    assert cfg["max_depth"] == 5
    assert cfg["overwrite"] is False


def test_load_missing_file_returns_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "missing.json"))
    assert cfg == get_default_config()


def test_load_corrupted_file_returns_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{ incomplete json ", encoding="utf-8")

    assert load_config(str(path)) == get_default_config()


def test_load_non_dict_returns_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert load_config(str(path)) == get_default_config()


def test_load_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_depth": 2, "theme": "dark"}), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["max_depth"] == 2
    assert "theme" not in cfg


def test_save_and_load_roundtrip(tmp_path):
    path = tmp_path / "config.json"
    cfg = get_default_config()
    cfg["output_path"] = "exports/run.csv"
    cfg["max_depth"] = 3

    save_config(cfg, str(path))

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored["version"] == CURRENT_CONFIG_VERSION
    assert stored["session"]["max_depth"] == 3

    loaded = load_config(str(path))
    assert loaded["output_path"] == "exports/run.csv"
    assert loaded["max_depth"] == 3


def test_save_creates_parent_directories(tmp_path):
    path = tmp_path / "settings" / "run.json"

    save_config(get_default_config(), str(path))

    assert path.exists()


def test_import_does_not_create_files_in_home(tmp_path):
    src_dir = Path(__file__).resolve().parents[3] / "src"
    env = os.environ.copy()
    env["HOME"] = str(tmp_path)
    env["USERPROFILE"] = str(tmp_path)
    env["LOCALAPPDATA"] = str(tmp_path)
    env["PYTHONPATH"] = str(src_dir) + os.pathsep + env.get("PYTHONPATH", "")

    result = subprocess.run(
        [sys.executable, "-c", "import cheattable2csv.domain.config"],
        cwd=str(tmp_path),
        env=env,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
    assert os.listdir(tmp_path) == []
