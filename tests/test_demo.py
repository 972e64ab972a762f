import pytest

from smallworld.demo import build_parser, load_graph_from_edges_csv, main


@pytest.fixture
def edges_csv(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text(
        "sourceId,targetId,type\n"
        "Gia Long,Minh Mang,father\n"
        "Minh Mang,Thieu Tri,father\n"
        "Thieu Tri,Tu Duc,father\n"
        "Minh Mang,Gia Long,son\n"
        "Tu Duc,Tu Duc,self\n"
        "Ham Nghi,Dong Khanh,brother\n",
        encoding="utf-8",
    )
    return path


def test_load_graph_from_edges_csv(edges_csv):
    g = load_graph_from_edges_csv(str(edges_csv))
    assert g.node_ids() == ["Gia Long", "Minh Mang", "Thieu Tri", "Tu Duc", "Ham Nghi", "Dong Khanh"]
    # repeated pair and self-loop are dropped
    assert len(g.edges) == 4


def test_load_graph_requires_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("a,b\n1,2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_graph_from_edges_csv(str(path))


def test_shortest_path_command(edges_csv, capsys):
    main(["shortest-path", "--edges-path", str(edges_csv), "--source", "Gia Long", "--target", "Tu Duc"])
    out = capsys.readouterr().out
    assert "Gia Long -> Minh Mang -> Thieu Tri -> Tu Duc" in out
    assert "Steps: 3" in out


def test_shortest_path_command_without_path(edges_csv, capsys):
    main(["shortest-path", "--edges-path", str(edges_csv), "--source", "Gia Long", "--target", "Ham Nghi"])
    assert "No path" in capsys.readouterr().out


def test_shortest_path_command_unknown_node(edges_csv, capsys):
    main(["shortest-path", "--edges-path", str(edges_csv), "--source", "Gia Long", "--target", "Nobody"])
    assert "Error" in capsys.readouterr().out


def test_missing_csv(tmp_path, capsys):
    main(["shortest-path", "--edges-path", str(tmp_path / "nope.csv"), "--source", "a", "--target", "b"])
    assert "Missing input file" in capsys.readouterr().out


def test_watts_strogatz_command(capsys):
    main(["watts-strogatz", "--n", "20", "--k", "4", "--p", "0", "--seed", "1"])
    out = capsys.readouterr().out
    assert "Regime: Regular Lattice" in out
    assert "Clustering coefficient C: 0.5000" in out
    assert "Rewired edges: 0/40" in out


def test_kleinberg_command(capsys):
    main(["kleinberg", "--grid-size", "3", "--r", "3", "--seed", "5"])
    out = capsys.readouterr().out
    assert "Lattice links: 54, shortcuts: 27" in out
    assert "Status: success" in out


def test_kleinberg_command_animated(capsys):
    main(["kleinberg", "--grid-size", "3", "--seed", "5", "--animate", "--delay-ms", "0"])
    out = capsys.readouterr().out
    assert "step 0: at (0, 0, 0)" in out
    assert "[success]" in out


def test_adamic_adar_command(capsys):
    main(["adamic-adar", "--n", "6", "--p", "1", "--seed", "2", "--source", "Node 1", "--target", "Node 2"])
    out = capsys.readouterr().out
    # complete graph on 6 nodes: 4 common neighbours of degree 5
    assert "Adamic-Adar(Node 1, Node 2) = 5.7227" in out


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
