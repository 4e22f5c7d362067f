"""PagingController.insert_item / update_item のテスト。"""

from __future__ import annotations

import pytest

from scrollpage import (
    DuplicateItemIdError,
    DuplicateScope,
    ItemIdMismatchError,
    ItemIndexOutOfRangeError,
    ItemNotFoundError,
    PagingController,
    PagingState,
)


def _make_controller(value: PagingState[int, str] | None = None) -> PagingController[int, str]:
    return PagingController(
        get_next_page_key=lambda state: 1,
        fetch_page=lambda key: [],
        get_item_id=lambda item: item.lower().replace(" ", "-"),
        value=value,
    )


def test_inserts_into_empty_state() -> None:
    controller = _make_controller()

    controller.insert_item(id="new-id", item="New Item", index=0)

    assert controller.value.pages == (("New Item",),)
    assert controller.value.item_ids == (("new-id",),)


def test_inserts_at_specific_position() -> None:
    controller = _make_controller(
        PagingState(pages=[["Item 1", "Item 3"]], item_ids=[["id-1", "id-3"]], keys=[1])
    )

    controller.insert_item(id="id-2", item="Item 2", index=1)

    assert controller.value.pages == (("Item 1", "Item 2", "Item 3"),)
    assert controller.value.item_ids == (("id-1", "id-2", "id-3"),)
    assert controller.value.keys == (1,)


def test_inserts_at_page_boundary_into_earlier_page() -> None:
    controller = _make_controller(
        PagingState(pages=[["a", "b"], ["c"]], item_ids=[["a", "b"], ["c"]], keys=[1, 2])
    )

    controller.insert_item(id="x", item="X", index=2)

    assert controller.value.pages == (("a", "b", "X"), ("c",))
    assert controller.value.item_ids == (("a", "b", "x"), ("c",))


def test_inserts_into_later_page() -> None:
    controller = _make_controller(
        PagingState(pages=[["a", "b"], ["c", "d"]], item_ids=[["a", "b"], ["c", "d"]], keys=[1, 2])
    )

    controller.insert_item(id="x", item="X", index=3)

    assert controller.value.pages == (("a", "b"), ("c", "X", "d"))


def test_inserts_at_end() -> None:
    controller = _make_controller(
        PagingState(pages=[["a"], ["b"]], item_ids=[["a"], ["b"]], keys=[1, 2])
    )

    controller.insert_item(id="x", item="X", index=2)

    assert controller.value.pages == (("a",), ("b", "X"))
    assert controller.value.item_ids == (("a",), ("b", "x"))


def test_builds_missing_item_ids_lazily() -> None:
    controller = _make_controller(PagingState(pages=[["Item A"], ["Item B"]], keys=[1, 2]))

    controller.insert_item(id="x", item="X", index=1)

    assert controller.value.item_ids == (("item-a", "x"), ("item-b",))


def test_throws_when_id_already_exists() -> None:
    before = PagingState(pages=[["Item 1"]], item_ids=[["dup"]], keys=[1])
    controller = _make_controller(before)

    with pytest.raises(DuplicateItemIdError) as exc_info:
        controller.insert_item(id="dup", item="Item 2", index=1)

    assert exc_info.value.scope is DuplicateScope.INSERT
    assert controller.value == before


def test_duplicate_check_uses_lazily_built_ids() -> None:
    controller = _make_controller(PagingState(pages=[["Item A"]], keys=[1]))

    with pytest.raises(DuplicateItemIdError):
        controller.insert_item(id="item-a", item="Item A", index=0)


@pytest.mark.parametrize("index", [-1, 2])
def test_throws_when_index_out_of_range(index: int) -> None:
    before = PagingState(pages=[["a"]], item_ids=[["a"]], keys=[1])
    controller = _make_controller(before)

    with pytest.raises(ItemIndexOutOfRangeError) as exc_info:
        controller.insert_item(id="out", item="Item", index=index)

    assert exc_info.value.end == 1
    assert isinstance(exc_info.value, IndexError)
    assert controller.value == before


def test_throws_when_index_out_of_range_on_empty_state() -> None:
    controller = _make_controller()

    with pytest.raises(ItemIndexOutOfRangeError):
        controller.insert_item(id="out", item="Item", index=1)

    assert controller.value.pages is None


def test_insert_publishes_once() -> None:
    seen: list[PagingState[int, str]] = []
    controller = _make_controller()
    controller.add_listener(seen.append)

    controller.insert_item(id="a", item="A", index=0)

    assert len(seen) == 1


def test_update_item_replaces_in_place() -> None:
    controller = _make_controller(
        PagingState(pages=[["Item A"], ["Item B"]], item_ids=[["item-a"], ["item-b"]], keys=[1, 2])
    )

    controller.update_item(id="item-b", update=str.upper)

    assert controller.value.pages == (("Item A",), ("ITEM B",))
    assert controller.value.item_ids == (("item-a",), ("item-b",))


def test_update_item_unknown_id() -> None:
    controller = _make_controller(PagingState(pages=[["Item A"]], keys=[1]))

    with pytest.raises(ItemNotFoundError):
        controller.update_item(id="missing", update=str.upper)


def test_update_item_rejects_changed_id() -> None:
    before = PagingState(pages=[["Item A"]], item_ids=[["item-a"]], keys=[1])
    controller = _make_controller(before)

    with pytest.raises(ItemIdMismatchError) as exc_info:
        controller.update_item(id="item-a", update=lambda item: "Item Z")

    assert exc_info.value.actual_id == "item-z"
    assert controller.value == before


def test_update_item_rejects_colliding_id() -> None:
    controller = _make_controller(
        PagingState(pages=[["Item A", "Item B"]], item_ids=[["item-a", "item-b"]], keys=[1])
    )

    with pytest.raises(DuplicateItemIdError) as exc_info:
        controller.update_item(id="item-a", update=lambda item: "Item B")

    assert exc_info.value.scope is DuplicateScope.UPDATE
    assert "更新後" in str(exc_info.value)
