import json

import pytest

from signed_balance.cli import _build_parser, main
from signed_balance.logging_io import read_jsonl


def _events(root) -> list[dict]:
    paths = sorted(root.glob("artifacts/*/events.jsonl"))
    return [record for path in paths for record in read_jsonl(path)]


def test_samples_lists_every_sample(capsys):
    assert main(["samples"]) == 0
    out = capsys.readouterr().out
    assert "balanced_triangle:" in out
    assert "complex_network_15:" in out


def test_analyze_sample_graph_prints_summary_and_writes_output(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    output = tmp_path / "summary.json"
    code = main(["analyze", "--graph", "unbalanced_triangle", "--output", str(output)])
    assert code == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["name"] == "unbalanced_triangle"
    assert printed["balanced"] is False
    assert json.loads(output.read_text(encoding="utf-8")) == printed
    events = _events(tmp_path)
    assert [e["event_type"] for e in events] == ["graph_analyzed"]
    assert events[0]["payload"]["verdicts"]["agree"] is True


def test_analyze_uses_config_sample_graph_and_experiment_id(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    config = tmp_path / "balance.json"
    config.write_text(
        json.dumps({"sample_graph": "mixed_square", "experiment_id": "run1"}), encoding="utf-8"
    )
    assert main(["analyze", "--config", str(config)]) == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["name"] == "mixed_square"
    assert printed["balanced"] is True
    assert (tmp_path / "artifacts" / "run1" / "events.jsonl").exists()


def test_analyze_input_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    graph_path = tmp_path / "graph.json"
    graph_path.write_text(
        json.dumps({"edges": [["x", "y", "-"], ["y", "z", "-"], ["z", "x", "-"]]}),
        encoding="utf-8",
    )
    assert main(["analyze", "--input", str(graph_path)]) == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["num_nodes"] == 3
    assert printed["balanced"] is False
    assert printed["super_nodes"]["partition"] == {
        "success": False,
        "group_x": None,
        "group_y": None,
    }


@pytest.mark.parametrize(
    "payload",
    [None, '{"edges": [["x", "y", "?"]]}', "[]"],
)
def test_analyze_bad_input_exits_with_2(tmp_path, monkeypatch, payload):
    monkeypatch.chdir(tmp_path)
    graph_path = tmp_path / "graph.json"
    if payload is not None:
        graph_path.write_text(payload, encoding="utf-8")
    assert main(["analyze", "--input", str(graph_path)]) == 2
    assert _events(tmp_path) == []


def test_analyze_rejects_graph_and_input_together():
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["analyze", "--graph", "balanced_quad", "--input", "g.json"])


def test_crosscheck_passes_and_logs_event(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["crosscheck", "--count", "6", "--seed", "1"]) == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["num_graphs"] == 6
    assert printed["seed"] == 1
    assert printed["passed"] is True
    events = _events(tmp_path)
    assert events[0]["event_type"] == "crosscheck_completed"
    assert "disagreements" not in events[0]["payload"]


def test_crosscheck_exits_1_on_disagreement(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        "signed_balance.cli.crosscheck_random_graphs",
        lambda cfg: {"num_graphs": cfg.crosscheck_graphs, "disagreements": [{}], "passed": False},
    )
    assert main(["crosscheck", "--count", "2"]) == 1
    assert json.loads(capsys.readouterr().out)["passed"] is False


def test_crosscheck_invalid_count_exits_with_2(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["crosscheck", "--count", "0"]) == 2


def test_crosscheck_unknown_config_key_exits_with_2(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = tmp_path / "balance.json"
    config.write_text(json.dumps({"sead": 3}), encoding="utf-8")
    assert main(["crosscheck", "--config", str(config)]) == 2
    assert main(["analyze", "--config", str(config)]) == 2


@pytest.mark.parametrize(
    "edges",
    [
        [[1, "a", "+"], ["a", 2, "-"]],
        [[["a"], "b", "+"]],
    ],
    ids=["mixed_id_types", "unhashable_id"],
)
def test_analyze_rejects_unusable_node_ids(tmp_path, monkeypatch, edges):
    monkeypatch.chdir(tmp_path)
    graph_path = tmp_path / "graph.json"
    graph_path.write_text(json.dumps({"edges": edges}), encoding="utf-8")
    assert main(["analyze", "--input", str(graph_path)]) == 2
    assert _events(tmp_path) == []
