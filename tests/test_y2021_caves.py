import pytest

from aocsolver.y2021.caves import Cave, CaveKind, CaveSystem, parse_caves

SAMPLE = "start-A\nstart-b\nA-c\nA-b\nb-d\nA-end\nb-end\n"


def test_kinds():
    assert Cave("start").kind is CaveKind.START
    assert Cave("end").kind is CaveKind.END
    assert Cave("b").kind is CaveKind.SMALL
    assert Cave("HN").kind is CaveKind.BIG


def test_add_returns_existing_cave():
    system = CaveSystem()
    cave = system.add("A")
    assert system.add("A") is cave
    assert system.caves == [cave]


def test_connect_is_two_way_and_once():
    a, b = Cave("A"), Cave("b")
    a.connect(b)
    a.connect(b)
    assert a.connections == [b]
    assert b.connections == [a]


def test_can_visit_rules():
    assert Cave("start").can_visit(["start"]) is False
    assert Cave("A").can_visit(["start", "A", "A"]) is True
    assert Cave("end").can_visit(["start"]) is True
    assert Cave("b").can_visit(["start", "b"]) is False
    assert Cave("b").can_visit(["start", "b"], True) is True
    assert Cave("b").can_visit(["start", "c", "c", "b"], True) is False


def test_sample_paths():
    assert parse_caves(SAMPLE).navigate() == 10


def test_sample_paths_with_revisit():
    assert parse_caves(SAMPLE).navigate((), True) == 36


def test_revisit_finds_at_least_as_many_paths():
    start = parse_caves(SAMPLE)
    assert start.navigate((), True) >= start.navigate()


def test_navigate_must_start_at_start():
    with pytest.raises(ValueError):
        Cave("b").navigate()


def test_missing_start():
    with pytest.raises(ValueError):
        parse_caves("A-b\nb-end\n")