import json
import logging
import os

from stonelayout.__main__ import main
from stonelayout.config import PRESETS_PATH
from stonelayout.logging_config import setup_logging


def test_default_run(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "stones, total area" in out
    assert "truncated" not in out


def test_preset_and_json(tmp_path, capsys):
    out_path = tmp_path / "layout.json"
    preset = os.path.join(PRESETS_PATH, "tile_stack.oob")

    assert main(["--preset", preset, "--seed", "7", "--json", str(out_path)]) == 0

    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert data["parameters"]["patternType"] == "stack"
    assert data["parameters"]["wallWidth"] == 6000.0
    assert f"{data['layout']['stoneCount']} stones" in capsys.readouterr().out


def test_overrides(tmp_path):
    out_path = tmp_path / "layout.json"
    assert main(["--pattern", "random", "--direction", "vertical", "--json", str(out_path)]) == 0

    params = json.loads(out_path.read_text(encoding="utf-8"))["parameters"]
    assert params["patternType"] == "random"
    assert params["layoutDirection"] == "vertical"


def test_truncation_is_reported(capsys):
    assert main(["--max-stones", "5"]) == 0
    assert "(truncated)" in capsys.readouterr().out


def test_vtk_output(tmp_path):
    out_path = tmp_path / "wall.vtp"
    assert main(["--vtk", str(out_path)]) == 0
    assert out_path.exists()


def test_missing_preset(tmp_path):
    assert main(["--preset", str(tmp_path / "missing.oob")]) == 1


def test_invalid_seed():
    assert main(["--seed", "-3"]) == 2


def test_unwritable_json(tmp_path):
    assert main(["--json", str(tmp_path / "no" / "such" / "dir.json")]) == 1


def test_empty_layout_vtk_is_reported(tmp_path, caplog):
    preset = tmp_path / "sliver.oob"
    preset.write_text("@@wall_width 15\n@@wall_height 500\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="stonelayout"):
        code = main(["--preset", str(preset), "--vtk", str(tmp_path / "wall.vtp")])

    assert code == 1
    assert "no stones" in caplog.text


def test_setup_logging_by_name(tmp_path):
    log_path = tmp_path / "run.log"
    setup_logging("INFO", log_file=str(log_path))

    logger = logging.getLogger("stonelayout")
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2

    setup_logging("DEBUG")
    assert len(logger.handlers) == 1


def test_log_file_option(tmp_path):
    log_path = tmp_path / "run.log"
    assert main(["--log-level", "INFO", "--log-file", str(log_path)]) == 0
    assert "Layout generated" in log_path.read_text(encoding="utf-8")
