import json

import pytest

import edgesnap.__main__ as cli


def _rect_payload(name, x, y, w=10, h=10):
    return {
        "name": name,
        "absoluteBoundingBox": {"x": x, "y": y, "width": w, "height": h},
        "absoluteRenderBounds": {"x": x, "y": y, "width": w, "height": h},
        "vectorNetwork": {
            "vertices": [{"x": 0, "y": 0}, {"x": w, "y": 0}, {"x": w, "y": h}, {"x": 0, "y": h}],
            "segments": [{"start": i, "end": (i + 1) % 4} for i in range(4)],
        },
    }


def _write(tmp_path, shapes):
    path = tmp_path / "shapes.json"
    path.write_text(json.dumps({"shapes": shapes}), encoding="utf-8")
    return path


def test_main_detects_axis_and_writes_output(tmp_path, capsys):
    path = _write(tmp_path, [_rect_payload("A", 0, 0), _rect_payload("B", 20, 0)])
    output = tmp_path / "out" / "aligned.json"

    cli.main([str(path), "--output", str(output)])

    printed = capsys.readouterr().out
    assert "Axis: horizontal" in printed
    assert "Current spacing: 10" in printed
    assert "Move: B by -10" in printed
    assert "Final spacing: 0" in printed
    written = json.loads(output.read_text(encoding="utf-8"))
    assert written["shapes"][1]["absoluteBoundingBox"]["x"] == 10.0


def test_main_rejects_diagonal_selection(tmp_path, capsys):
    path = _write(tmp_path, [_rect_payload("A", 0, 0), _rect_payload("B", 15, 15)])

    with pytest.raises(SystemExit) as exc:
        cli.main([str(path)])

    assert exc.value.code == 1
    assert "side by side or stacked" in capsys.readouterr().out


def test_main_reports_unalignable(tmp_path, capsys, monkeypatch):
    path = _write(tmp_path, [_rect_payload("A", 0, 0), _rect_payload("B", 20, 0)])
    monkeypatch.setattr(cli, "resolve", lambda a, b, axis, options: None)

    with pytest.raises(SystemExit) as exc:
        cli.main([str(path), "--axis", "horizontal"])

    assert exc.value.code == 1
    assert "No Alignable Point Found" in capsys.readouterr().out


def test_main_passes_options_through(tmp_path, monkeypatch):
    path = _write(tmp_path, [_rect_payload("A", 0, 0), _rect_payload("B", 20, 0)])
    seen = []

    def _resolve(a, b, axis, options):
        seen.append((axis, options.probe_epsilon, options.retry))
        return None

    monkeypatch.setattr(cli, "resolve", _resolve)

    with pytest.raises(SystemExit):
        cli.main([str(path), "--axis", "vertical", "--epsilon", "0.25", "--no-retry"])

    assert seen == [("vertical", 0.25, False)]


def test_main_exits_on_malformed_file(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"shapes": [{}]}), encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        cli.main([str(path)])

    assert exc.value.code == 2
