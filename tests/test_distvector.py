import io

import pytest

from netlab.distvector import (
    MAX_NODES,
    UNREACHABLE,
    Route,
    compute_routes,
    format_routes,
    main,
    parse_cost_matrix,
)

TRIANGLE = [1, 4, 1, 2, 4, 2]


def test_parse_marks_missing_links_and_zero_diagonal():
    assert parse_cost_matrix(2, [5, -1]) == [[0, 5], [UNREACHABLE, 0]]


def test_parse_rejects_too_few_costs():
    with pytest.raises(ValueError):
        parse_cost_matrix(3, [1, 2, 3])


def test_parse_rejects_too_many_costs():
    with pytest.raises(ValueError):
        parse_cost_matrix(2, [1, 2, 3])


def test_parse_rejects_too_many_nodes():
    with pytest.raises(ValueError):
        parse_cost_matrix(MAX_NODES + 1, [])


def test_parse_empty_matrix():
    assert parse_cost_matrix(0, []) == []


def test_compute_rejects_non_square():
    with pytest.raises(ValueError):
        compute_routes([[0, 1], [1]])


def test_shorter_path_through_intermediate_node():
    routes = compute_routes(parse_cost_matrix(3, TRIANGLE))
    assert routes[0][2] == Route(destination=2, distance=3, via=1)


def test_self_routes_are_zero_and_direct():
    routes = compute_routes(parse_cost_matrix(3, TRIANGLE))
    for i, table in enumerate(routes):
        assert table[i].distance == 0
        assert table[i].via == i


def test_distances_never_exceed_direct_costs():
    costs = parse_cost_matrix(4, [3, -1, 7, 3, 2, -1, -1, 2, 1, 7, -1, 1])
    routes = compute_routes(costs)
    for i, table in enumerate(routes):
        for j, route in enumerate(table):
            assert route.destination == j
            assert route.distance <= costs[i][j]


def test_format_routes_lists_route_and_unreachable():
    text = format_routes(compute_routes(parse_cost_matrix(3, TRIANGLE)))
    assert text.startswith("\nFinal Routing Table:\n")
    assert "Router 1:\n" in text
    assert "Node 3: Distance 3, Route via Node 2\n" in text
    unreachable = format_routes(compute_routes(parse_cost_matrix(2, [-1, -1])))
    assert "Node 2 is unreachable\n" in unreachable


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n5\n7\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Node 2: Distance 5, Route via Node 2" in out
    assert "Node 1: Distance 7, Route via Node 1" in out


def test_main_reports_short_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1\n"))
    assert main([]) == 1
    assert "distvector:" in capsys.readouterr().err