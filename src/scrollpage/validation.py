"""識別子と挿入位置の検証。"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import chain
from typing import Any

from scrollpage.enums import DuplicateScope
from scrollpage.errors import DuplicateItemIdError, ItemIndexOutOfRangeError
from scrollpage.types import ItemIdCallback


def materialize_item_ids(
    *,
    pages: Sequence[Sequence[Any]] | None,
    item_ids: Sequence[Sequence[str]] | None,
    get_item_id: ItemIdCallback,
) -> list[list[str]]:
    """ページ数に満たない識別子列を ``get_item_id`` で補完する。

    Args:
        pages: ページごとの項目列。
        item_ids: 構築済みの識別子列。
        get_item_id: 識別子算出関数。

    Returns:
        ページ数と同じ長さの可変な識別子列。
    """

    ids = [list(page_ids) for page_ids in item_ids or ()]
    for page in list(pages or ())[len(ids):]:
        ids.append([get_item_id(item) for item in page])
    return ids


def validate_new_ids(new_ids: Iterable[str], existing_ids: Iterable[Iterable[str]] | None) -> None:
    """新規ページの識別子が一意か検証する。

    Args:
        new_ids: 取得したページの識別子。
        existing_ids: 既存ページの識別子列。

    Raises:
        DuplicateItemIdError: ページ内または既存ページと重複した場合。
    """

    existing = set(chain.from_iterable(existing_ids or ()))
    seen: set[str] = set()
    for item_id in new_ids:
        if item_id in seen:
            raise DuplicateItemIdError(item_id=item_id, scope=DuplicateScope.SAME_PAGE)
        if item_id in existing:
            raise DuplicateItemIdError(item_id=item_id, scope=DuplicateScope.ACROSS_PAGES)
        seen.add(item_id)


def validate_insert_id(item_id: str, existing_ids: Iterable[Iterable[str]]) -> None:
    """挿入する識別子が未使用か検証する。"""

    for page_ids in existing_ids:
        if item_id in page_ids:
            raise DuplicateItemIdError(item_id=item_id, scope=DuplicateScope.INSERT)


def validate_insert_index(index: int, *, total: int) -> None:
    """挿入位置が ``[0, total]`` の範囲内か検証する。

    Raises:
        ItemIndexOutOfRangeError: 範囲外の場合。
    """

    if index < 0 or index > total:
        raise ItemIndexOutOfRangeError(index=index, start=0, end=total)
