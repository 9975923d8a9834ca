import json
import zipfile

import pytest

from sitegen import config
from sitegen.main import main


@pytest.fixture
def brief_dir(tmp_path, brief_md):
    folder = tmp_path / "brief"
    folder.mkdir()
    (folder / "brief.md").write_text(brief_md, encoding="utf-8")
    return folder


def test_cli_writes_outputs(tmp_path, brief_dir, capsys):
    out = tmp_path / "out"
    main(["--brief", str(brief_dir), "--output", str(out)])

    assert (out / "index.html").exists()
    assert (out / "styles.css").exists()
    assert (out / "palette.png").exists()
    zips = list(out.glob("*.zip"))
    assert len(zips) == 1
    with zipfile.ZipFile(zips[0]) as zf:
        assert "site/index.html" in zf.namelist()

    stdout = capsys.readouterr().out
    assert "Template Complete" in stdout
    assert "Color Palette" in stdout


def test_cli_flags(tmp_path, brief_dir):
    out = tmp_path / "out"
    main(["--brief", str(brief_dir), "--output", str(out), "--no-zip", "--no-preview", "--ratio", "1.5"])

    assert not list(out.glob("*.zip"))
    assert not (out / "palette.png").exists()
    tokens = json.loads((out / "design-tokens.json").read_text(encoding="utf-8"))
    assert tokens["typography"]["scale"]["lg"] == "1.500rem"


def test_cli_json_output(tmp_path, brief_dir, capsys):
    out = tmp_path / "out"
    main(["--brief", str(brief_dir), "--output", str(out), "--no-zip", "--json"])

    stdout = capsys.readouterr().out
    assert '"designTokens"' in stdout
    assert "Template Complete" not in stdout
    assert (out / "template.json").exists()


def test_cli_missing_brief_exits_2(tmp_path):
    out = tmp_path / "out"
    with pytest.raises(SystemExit) as excinfo:
        main(["--brief", str(tmp_path / "nope"), "--output", str(out)])
    assert excinfo.value.code == 2
    assert not out.exists()


def test_cli_incomplete_brief_exits_2(tmp_path, capsys):
    brief = tmp_path / "brief.md"
    brief.write_text("## Project Type\nlanding\n", encoding="utf-8")
    out = tmp_path / "out"

    with pytest.raises(SystemExit) as excinfo:
        main(["--brief", str(brief), "--output", str(out)])
    assert excinfo.value.code == 2
    assert "industry" in capsys.readouterr().out
    assert not out.exists()


@pytest.mark.parametrize("ratio", ["0", "-1.25", "1", "0.8", "nan", "abc"])
def test_cli_rejects_bad_ratio(tmp_path, brief_dir, capsys, ratio):
    out = tmp_path / "out"
    with pytest.raises(SystemExit) as excinfo:
        main(["--brief", str(brief_dir), "--output", str(out), "--ratio", ratio])
    assert excinfo.value.code == 2
    assert "--ratio" in capsys.readouterr().err
    assert not out.exists()


@pytest.mark.parametrize("setting,value", [("SCALE_RATIO", 1.0), ("BASE_FONT_SIZE", 0.0)])
def test_cli_rejects_bad_settings(tmp_path, brief_dir, capsys, monkeypatch, setting, value):
    monkeypatch.setattr(config, setting, value)
    out = tmp_path / "out"
    with pytest.raises(SystemExit) as excinfo:
        main(["--brief", str(brief_dir), "--output", str(out)])
    assert excinfo.value.code == 2
    assert f"SITEGEN_{setting}" in capsys.readouterr().out
    assert not out.exists()
