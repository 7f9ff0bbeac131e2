import logging

import pytest

from prim_forest.cli import main, parse_flag, read_graph


@pytest.fixture
def cycle_csv(tmp_path):
    path = tmp_path / "cycle.csv"
    path.write_text("a,b,1\nb,c,2\nc,d,3\nd,a,4\n")
    return path


def test_parse_flag():
    assert parse_flag("true")
    assert parse_flag("TRUE")
    assert not parse_flag("false")
    assert not parse_flag("yes")


def test_main_prints_summary(cycle_csv, capsys):
    assert main(["false", "true", str(cycle_csv)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Number of nodes: 4",
        "Number of edges: 3",
        "Total weight: 6.00 km",
    ]


def test_short_rows_are_skipped(tmp_path, caplog):
    path = tmp_path / "short.csv"
    path.write_text("a,b,1.5\nbroken,row\n\nb,c,2\n")
    with caplog.at_level(logging.WARNING, logger="prim_forest.cli"):
        graph = read_graph(str(path), directed=False, labelled=True)
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert [record.getMessage().split(":")[0] for record in warnings] == [
        f"Skipping line 2 of {path}",
        f"Skipping line 3 of {path}",
    ]
    assert graph.num_nodes() == 3
    assert graph.num_edges() == 2
    assert graph.label("c", "b") == 2.0


def test_fields_are_trimmed(tmp_path):
    path = tmp_path / "spaces.csv"
    path.write_text(" a , b , 3 \n")
    graph = read_graph(str(path), directed=True, labelled=True)
    assert graph.contains_edge("a", "b")
    assert not graph.contains_edge("b", "a")


def test_bad_weight_aborts(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_text("a,b,1\nb,c,heavy\n")
    with pytest.raises(ValueError, match="line 2|Line 2"):
        read_graph(str(path), directed=False, labelled=True)
    assert main(["false", "true", str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_missing_file(tmp_path, capsys):
    assert main(["false", "true", str(tmp_path / "missing.csv")]) == 1
    assert capsys.readouterr().out == ""


def test_unlabelled_graph_cannot_be_weighed(cycle_csv, capsys):
    assert main(["false", "false", str(cycle_csv)]) == 1
    assert capsys.readouterr().out == ""


def test_oversized_field_exits_cleanly(tmp_path, capsys):
    path = tmp_path / "huge.csv"
    path.write_text("a,b," + "1" * 200000 + "\n")
    assert main(["false", "true", str(path)]) == 1
    assert capsys.readouterr().out == ""
