"""ページング状態の値オブジェクト。"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from itertools import chain
from typing import Any, Generic, TypeVar

from scrollpage.enums import PagingStatus

K = TypeVar("K")
T = TypeVar("T")
R = TypeVar("R")


def _freeze_pages(pages: Iterable[Iterable[Any]] | None) -> tuple[tuple[Any, ...], ...] | None:
    if pages is None:
        return None
    return tuple(tuple(page) for page in pages)


def total_item_count(pages: Sequence[Sequence[Any]] | None) -> int:
    """ページ列の総項目数を返す。"""

    if pages is None:
        return 0
    return sum(len(page) for page in pages)


@dataclass(slots=True, frozen=True)
class PagingState(Generic[K, T]):
    """読み込み済みページとステータスのスナップショット。

    ``pages`` / ``item_ids`` / ``keys`` は並行配列で、同じ位置が同じページを表す。
    リストで渡された値はタプルへ変換されるため、公開後に内部を書き換えることはできない。

    Attributes:
        pages: ページごとの項目列。未読込時はNone。
        item_ids: ページごとの項目識別子列。未構築時はNone。
        keys: 各ページの取得に使ったキー。
        error: 直近のフェッチで発生した例外。
        has_next_page: 続きのページが存在するか。
        is_loading: フェッチ中か。
    """

    pages: tuple[tuple[T, ...], ...] | None = None
    item_ids: tuple[tuple[str, ...], ...] | None = None
    keys: tuple[K, ...] | None = None
    error: BaseException | None = None
    has_next_page: bool = True
    is_loading: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "pages", _freeze_pages(self.pages))
        object.__setattr__(self, "item_ids", _freeze_pages(self.item_ids))
        if self.keys is not None:
            object.__setattr__(self, "keys", tuple(self.keys))

    def copy_with(self, **changes: Any) -> PagingState[K, T]:
        """指定フィールドだけを置き換えた新しい状態を返す。

        明示的に ``None`` を渡したフィールドはクリアされる。整合性の検証は行わない。

        Args:
            **changes: 置き換えるフィールドと値。

        Returns:
            新しい状態。

        Raises:
            TypeError: 存在しないフィールド名が指定された場合。
        """

        return dataclasses.replace(self, **changes)

    def reset(self) -> PagingState[K, T]:
        """全ページを破棄した初期状態を返す。"""

        return dataclasses.replace(
            self,
            pages=None,
            item_ids=None,
            keys=None,
            error=None,
            has_next_page=True,
            is_loading=False,
        )

    @property
    def items(self) -> tuple[T, ...]:
        """全ページの項目をページ順に平坦化したもの。"""

        if self.pages is None:
            return ()
        return tuple(chain.from_iterable(self.pages))

    @property
    def flat_item_ids(self) -> tuple[str, ...]:
        """全ページの識別子をページ順に平坦化したもの。"""

        if self.item_ids is None:
            return ()
        return tuple(chain.from_iterable(self.item_ids))

    @property
    def item_count(self) -> int:
        """全ページの項目数。"""

        return total_item_count(self.pages)

    @property
    def last_key(self) -> K | None:
        """最後に読み込んだページのキー。"""

        if not self.keys:
            return None
        return self.keys[-1]

    @property
    def last_page_is_empty(self) -> bool:
        """最後に読み込んだページが空か。"""

        if not self.pages:
            return False
        return len(self.pages[-1]) == 0

    @property
    def status(self) -> PagingStatus:
        """UI向けに導出したステータス。"""

        has_items = self.item_count > 0
        has_error = self.error is not None
        if has_items:
            if not self.has_next_page:
                return PagingStatus.COMPLETED
            if has_error:
                return PagingStatus.SUBSEQUENT_PAGE_ERROR
            return PagingStatus.ONGOING
        if has_error:
            return PagingStatus.FIRST_PAGE_ERROR
        if self.has_next_page:
            return PagingStatus.LOADING_FIRST_PAGE
        return PagingStatus.NO_ITEMS_FOUND

    def map_items(self, fn: Callable[[T], R]) -> PagingState[K, R]:
        """全項目に ``fn`` を適用した状態を返す。

        ページ構成・識別子・キーは変更しない。
        """

        if self.pages is None:
            return self  # type: ignore[return-value]
        return dataclasses.replace(
            self,
            pages=[[fn(item) for item in page] for page in self.pages],
        )  # type: ignore[return-value]

    def filter_items(self, predicate: Callable[[T], bool]) -> PagingState[K, T]:
        """条件を満たす項目だけを残した状態を返す。

        識別子列が構築済みなら同じ位置で絞り込む。ページ数とキーは維持する。
        """

        if self.pages is None:
            return self
        keep = [[predicate(item) for item in page] for page in self.pages]
        pages = [
            [item for item, kept in zip(page, flags) if kept]
            for page, flags in zip(self.pages, keep)
        ]
        item_ids: list[list[str]] | None = None
        if self.item_ids is not None:
            item_ids = [
                [item_id for item_id, kept in zip(ids, flags) if kept]
                for ids, flags in zip(self.item_ids, keep)
            ]
        return dataclasses.replace(self, pages=pages, item_ids=item_ids)
