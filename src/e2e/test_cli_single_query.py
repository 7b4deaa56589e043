import json
from pathlib import Path
import pytest
from cutter_web.__main__ import main


def _seed(tmp: Path) -> str:
    root = tmp / "data"; root.mkdir()
    (root / "cutter_table_t.json").write_text(json.dumps([
        {"group": "T", "name": "Thomas, J.", "cutter": "36"},
        {"group": "T", "name": "Thornton, K.", "cutter": "45"},
    ]), encoding="utf-8")
    return str(root)


@pytest.mark.e2e
def test_cli_json_output(tmp_path: Path, capsys):
    root = _seed(tmp_path)
    rc = main(["--store", f"json://{root}", "--surname", "Thompson", "--edition", "3", "--json"])
    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["code"] == "T36.3"
    assert out["edition"] == "3rd edition"


@pytest.mark.e2e
def test_cli_table_output_marks_selection(tmp_path: Path, capsys):
    root = _seed(tmp_path)
    rc = main(["--store", f"json://{root}", "--surname", "Thompson"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Cutter: T36" in out
    assert "<- SELECTED" in out


@pytest.mark.e2e
def test_cli_reports_errors_on_stderr(tmp_path: Path, capsys):
    root = _seed(tmp_path)
    rc = main(["--store", f"json://{root}", "--surname", "Brown"])
    assert rc == 1
    assert "Failed to load cutter table" in capsys.readouterr().err


@pytest.mark.e2e
def test_cli_import_json_into_sqlite(tmp_path: Path, capsys):
    root = _seed(tmp_path)
    db = tmp_path / "out" / "cutter.sqlite"
    assert main(["--import-json", root, "--into", str(db)]) == 0
    assert db.exists()
    assert "imported 1 partitions" in capsys.readouterr().out

    rc = main(["--store", f"sqlite:///{db}", "--surname", "Thornton", "--json"])
    assert rc == 0
    assert json.loads(capsys.readouterr().out)["code"] == "T45"
