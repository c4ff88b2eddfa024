import csv
import json

import pytest

from perfscore.cli.main import main


STUDENTS = (
    "name,nim,gpa,activity\n"
    "Ani,101,3.2,72\n"
    "Budi,102,4.0,100\n"
    "Citra,103,0,0\n"
    "Dewi,104,,55\n"
    "Eko,105,abc,60\n"
)


@pytest.fixture
def students_csv(tmp_path):
    p = tmp_path / "students.csv"
    p.write_text(STUDENTS, encoding="utf-8")
    return p


def _rows(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


def test_evaluate_text(capsys):
    assert main(["evaluate", "--gpa", "3.2", "--activity", "72"]) == 0
    out = capsys.readouterr().out
    assert "score: 65.00" in out
    assert "label: Medium" in out


def test_evaluate_json(capsys):
    main(["evaluate", "--gpa", "4", "--activity", "100", "--json"])
    assert json.loads(capsys.readouterr().out) == {"score": 80.0, "label": "High"}


def test_evaluate_with_config(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("engine:\n  centroids: {low: 30, medium: 60, high: 90}\n")
    main(["evaluate", "--gpa", "3.2", "--activity", "72", "--config", str(cfg)])
    assert "score: 75.00" in capsys.readouterr().out


def test_evaluate_non_finite_exits_2(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["evaluate", "--gpa", "nan", "--activity", "72"])
    assert exc.value.code == 2
    assert "gpa must be finite" in capsys.readouterr().err


def test_bad_config_exits_2(tmp_path, capsys):
    cfg = tmp_path / "cfg.toml"
    cfg.write_text("")
    with pytest.raises(SystemExit) as exc:
        main(["evaluate", "--gpa", "3", "--activity", "50", "--config", str(cfg)])
    assert exc.value.code == 2
    assert "unsupported config format" in capsys.readouterr().err


def test_explain_text(capsys):
    main(["explain", "--gpa", "3.2", "--activity", "72"])
    out = capsys.readouterr().out
    assert "IF gpa is medium" in out
    assert "score: 65.00  label: Medium" in out


def test_explain_json(capsys):
    main(["explain", "--gpa", "3.2", "--activity", "72", "--json", "--threshold", "0.5"])
    res = json.loads(capsys.readouterr().out)
    assert res["rules"] == []
    assert res["label"] == "Medium"


def test_show(capsys):
    main(["show", "--at", "gpa=3.2,activity=72"])
    out = capsys.readouterr().out
    assert "gpa=3.2 [0,4] -> low(0.00), medium(0.40), high(0.40)" in out
    assert "activity=72 [0,100] -> low(0.00), medium(0.40), high(0.60)" in out
    assert "low=20, medium=50, high=80" in out
    assert "R9: IF gpa is low AND activity is low THEN performance is low" in out


def test_show_shapes(capsys):
    main(["show"])
    out = capsys.readouterr().out
    assert "medium=Triangular(2, 2.75, 3.5)" in out


def test_show_bad_at():
    with pytest.raises(SystemExit):
        main(["show", "--at", "iq=120"])


def test_apply(students_csv, tmp_path):
    out = tmp_path / "scored.csv"
    main(["apply", "--csv", str(students_csv), "--out", str(out)])
    rows = _rows(out)
    assert [r["name"] for r in rows] == ["Ani", "Budi", "Citra", "Dewi", "Eko"]
    assert [(r["score"], r["label"]) for r in rows] == [
        ("65.00", "Medium"),
        ("80.00", "High"),
        ("20.00", "Low"),
        ("", "error"),
        ("", "error"),
    ]


def test_apply_stdout(students_csv, capsys):
    main(["apply", "--csv", str(students_csv)])
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "name,nim,gpa,activity,score,label"


def test_apply_custom_columns(tmp_path):
    src = tmp_path / "in.csv"
    src.write_text("ipk,aktif\n3.2,72\n", encoding="utf-8")
    out = tmp_path / "out.csv"
    main(["apply", "--csv", str(src), "--out", str(out), "--gpa-col", "ipk", "--activity-col", "aktif"])
    assert _rows(out) == [{"ipk": "3.2", "aktif": "72", "score": "65.00", "label": "Medium"}]


def test_apply_missing_column(tmp_path):
    src = tmp_path / "in.csv"
    src.write_text("name,gpa\nAni,3.2\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="Column 'activity' not found"):
        main(["apply", "--csv", str(src)])


def test_run_pipeline(students_csv, tmp_path, capsys):
    out = tmp_path / "scored.csv"
    cfg = tmp_path / "pipeline.yaml"
    cfg.write_text(
        "engine:\n"
        "  centroids: {low: 30, medium: 60, high: 90}\n"
        "evaluate: {gpa: 3.2, activity: 72}\n"
        f"apply: {{csv: '{students_csv}', out: '{out}'}}\n"
    )
    main(["run", "--config", str(cfg)])
    text = capsys.readouterr().out
    assert "[run] evaluate" in text
    assert "score: 75.00" in text
    assert text.index("[run] evaluate") < text.index("[run] apply")
    assert _rows(out)[1]["score"] == "90.00"


def test_run_missing_keys(tmp_path, capsys):
    cfg = tmp_path / "pipeline.json"
    cfg.write_text(json.dumps({"evaluate": {"gpa": 3.2}}))
    with pytest.raises(SystemExit) as exc:
        main(["run", "--config", str(cfg)])
    assert exc.value.code == 2
    assert "missing: activity" in capsys.readouterr().err


def test_apply_refuses_to_overwrite_input(students_csv):
    with pytest.raises(SystemExit, match="must not be the input file"):
        main(["apply", "--csv", str(students_csv), "--out", str(students_csv)])
    assert students_csv.read_text(encoding="utf-8") == STUDENTS


def test_apply_bad_input_leaves_existing_output(tmp_path):
    src = tmp_path / "in.csv"
    src.write_text("name,gpa\nAni,3.2\n", encoding="utf-8")
    out = tmp_path / "out.csv"
    out.write_text("previous results\n", encoding="utf-8")
    with pytest.raises(SystemExit, match="Column 'activity' not found"):
        main(["apply", "--csv", str(src), "--out", str(out)])
    assert out.read_text(encoding="utf-8") == "previous results\n"


def test_apply_unreadable_input_leaves_existing_output(tmp_path):
    out = tmp_path / "out.csv"
    out.write_text("previous results\n", encoding="utf-8")
    with pytest.raises(FileNotFoundError):
        main(["apply", "--csv", str(tmp_path / "missing.csv"), "--out", str(out)])
    assert out.read_text(encoding="utf-8") == "previous results\n"


@pytest.mark.parametrize("at", ["gpa=nan", "activity=inf", "gpa=3.2,activity=-inf"])
def test_show_rejects_non_finite_point(at, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["show", "--at", at])
    assert exc.value.code == 2
    assert "must be finite" in capsys.readouterr().err


def test_unknown_log_level_in_config_exits_2(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("logging:\n  level: verbose\n")
    with pytest.raises(SystemExit) as exc:
        main(["evaluate", "--gpa", "3.2", "--activity", "72", "--config", str(cfg)])
    assert exc.value.code == 2
    assert "logging.level must be one of" in capsys.readouterr().err
