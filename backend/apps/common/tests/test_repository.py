from dataclasses import dataclass

import pytest

from apps.common.repository import InMemoryTable


@dataclass(frozen=True)
class Row:
    id: int
    label: str


@pytest.fixture
def table():
    return InMemoryTable(Row)


def test_create_assigns_increasing_ids(table):
    first = table.create(label="a")
    second = table.create(label="b")
    assert (first.id, second.id) == (1, 2)
    assert table.list() == [first, second]


def test_ids_not_reused_after_delete(table):
    table.create(label="a")
    second = table.create(label="b")
    table.delete(second.id)
    third = table.create(label="c")
    assert third.id == 3
    assert table.get(second.id) is None


def test_replace_keeps_position_and_id(table):
    a = table.create(label="a")
    table.create(label="b")
    updated = table.replace(a.id, label="a2")
    assert updated == Row(id=1, label="a2")
    assert [r.label for r in table.list()] == ["a2", "b"]


def test_replace_missing_raises_key_error(table):
    with pytest.raises(KeyError):
        table.replace(42, label="x")
    assert table.count() == 0


def test_slice_is_half_open_and_clamped(table):
    for label in "abcde":
        table.create(label=label)
    assert [r.label for r in table.slice(1, 3)] == ["b", "c"]
    assert [r.label for r in table.slice(3, 10)] == ["d", "e"]
    assert table.slice(10, 20) == []
    assert table.slice(-5, 2) == []


def test_delete_where_removes_matching_rows(table):
    for label in ("keep", "drop", "drop"):
        table.create(label=label)
    removed = table.delete_where(lambda row: row.label == "drop")
    assert removed == [2, 3]
    assert [r.label for r in table.list()] == ["keep"]


def test_slice_far_beyond_end_is_empty(table):
    table.create(label="a")
    assert table.slice(10**19, 10**19 + 10) == []
    assert [r.label for r in table.slice(0, 10**19)] == ["a"]
