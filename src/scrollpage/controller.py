"""ページングコントローラ。"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import TypeVar

from scrollpage.config import ControllerConfig
from scrollpage.enums import DuplicateScope
from scrollpage.errors import (
    ControllerDisposedError,
    DuplicateItemIdError,
    ItemIdMismatchError,
    ItemNotFoundError,
)
from scrollpage.faults import FaultClassifier
from scrollpage.notifier import ValueNotifier
from scrollpage.state import PagingState, total_item_count
from scrollpage.types import FetchPageCallback, ItemIdCallback, NextPageKeyCallback
from scrollpage.validation import (
    materialize_item_ids,
    validate_insert_id,
    validate_insert_index,
    validate_new_ids,
)

K = TypeVar("K")
T = TypeVar("T")


class PagingController(ValueNotifier[PagingState[K, T]]):
    """``PagingState`` を保持し、ページの逐次取得を制御する。

    同時に実行されるフェッチは常に一つだけで、操作トークンで排他する。
    フェッチは非アトミックで、取得待ちの間に外部から ``value`` を書き換えてよい。
    取得結果は待機明けに読み直した最新の状態へマージされる。
    書き換えは同期的に行うこと。
    """

    def __init__(
        self,
        *,
        get_next_page_key: NextPageKeyCallback,
        fetch_page: FetchPageCallback,
        get_item_id: ItemIdCallback,
        value: PagingState[K, T] | None = None,
        config: ControllerConfig | None = None,
        fault_classifier: FaultClassifier | None = None,
    ) -> None:
        """コントローラを初期化する。

        Args:
            get_next_page_key: 次ページのキーを返す関数。``None`` で終端。
            fetch_page: ページを取得する関数。戻り値は項目列またはその awaitable。
            get_item_id: 項目の一意な識別子を返す関数。
            value: 初期状態。未指定時は空の状態。
            config: コントローラ設定。
            fault_classifier: 障害分類器。未指定時は ``config`` から生成する。
        """

        super().__init__(value if value is not None else PagingState())
        self.config = config or ControllerConfig()
        self._get_next_page_key = get_next_page_key
        self._fetch_page = fetch_page
        self._get_item_id = get_item_id
        self._fault_classifier = fault_classifier or FaultClassifier(
            defect_types=self.config.defect_types
        )
        self._logger = logging.getLogger(self.config.logger_name or __name__)
        # 実行中フェッチのトークン。fetch_next_page / refresh / cancel 以外から触る場合は
        # フェッチの前後で確認と設定を行うこと。
        self.operation: object | None = None

    async def fetch_next_page(self) -> None:
        """次のページを取得してマージする。

        フェッチ中、または続きのページがない場合は何もしない。
        同期的な ``fetch_page`` であれば一度も中断せずに完了する。

        Raises:
            ControllerDisposedError: 破棄済みの場合。
            Exception: 不具合に分類された例外。状態へ記録・反映したあとで再送出する。
        """

        if self.is_disposed:
            raise ControllerDisposedError()
        if self.operation is not None:
            return

        operation = self.operation = object()

        self.value = self.value.copy_with(is_loading=True, error=None)

        # 通知を開始時と終了時の二回に抑えるため、作業用の写しを使う。
        state = self.value

        try:
            if not state.has_next_page:
                return

            next_page_key = self._get_next_page_key(state)
            if next_page_key is None:
                self._logger.debug("次ページのキーがないため終端とします。")
                state = state.copy_with(has_next_page=False)
                return

            self._logger.debug("ページを取得します: key=%r", next_page_key)
            result = self._fetch_page(next_page_key)
            if inspect.isawaitable(result):
                new_items = list(await result)
            else:
                new_items = list(result)

            new_item_ids = [self._get_item_id(item) for item in new_items]

            # 取得中に更新された状態へマージする。アトミック性は失われる。
            state = self.value
            existing_ids = materialize_item_ids(
                pages=state.pages,
                item_ids=state.item_ids,
                get_item_id=self._get_item_id,
            )
            validate_new_ids(new_item_ids, existing_ids)

            state = state.copy_with(
                pages=[*(state.pages or ()), new_items],
                item_ids=[*existing_ids, new_item_ids],
                keys=[*(state.keys or ()), next_page_key],
            )
        except Exception as exc:
            state = state.copy_with(error=exc)
            fault = self._fault_classifier.classify(exc)
            if fault.should_propagate:
                self._logger.error("フェッチ中に不具合が発生しました: %r", exc)
                raise
            self._logger.warning("フェッチに失敗しました: %r", exc)
        finally:
            if operation is self.operation:
                self.value = state.copy_with(is_loading=False)
                self.operation = None
            else:
                self._logger.debug("取り消されたフェッチの結果を破棄しました。")

    def refresh(self) -> None:
        """実行中のフェッチを取り消し、状態を初期化する。"""

        self._logger.debug("状態を初期化します。")
        self.operation = None
        self.value = self.value.reset()

    def cancel(self) -> None:
        """実行中のフェッチを取り消す。読み込み済みのページは保持する。

        直後に ``fetch_next_page`` を呼べば新しいフェッチを開始できる。
        """

        self._logger.debug("フェッチを取り消します。")
        self.operation = None
        self.value = self.value.copy_with(is_loading=False)

    def insert_item(self, *, id: str, item: T, index: int) -> None:
        """平坦化した項目列の ``index`` の位置に項目を挿入する。

        Args:
            id: 挿入する項目の識別子。全項目の中で一意であること。
            item: 挿入する項目。
            index: 挿入位置。``0`` 以上、総項目数以下。

        Raises:
            DuplicateItemIdError: 識別子が既に存在する場合。
            ItemIndexOutOfRangeError: 挿入位置が範囲外の場合。
        """

        state = self.value

        pages = [list(page) for page in state.pages or ()]
        item_ids = materialize_item_ids(
            pages=pages,
            item_ids=state.item_ids,
            get_item_id=self._get_item_id,
        )

        validate_insert_id(id, item_ids)
        validate_insert_index(index, total=total_item_count(pages))

        if not pages:
            pages.append([item])
            item_ids.append([id])
        else:
            offset = 0
            for page, page_ids in zip(pages, item_ids):
                if index <= offset + len(page):
                    position = index - offset
                    page.insert(position, item)
                    page_ids.insert(position, id)
                    break
                offset += len(page)
            else:
                pages[-1].append(item)
                item_ids[-1].append(id)

        self.value = state.copy_with(pages=pages, item_ids=item_ids)

    def update_item(self, *, id: str, update: Callable[[T], T]) -> None:
        """識別子で指定した項目を ``update`` の結果で置き換える。

        Args:
            id: 更新する項目の識別子。
            update: 現在の項目を受け取り、新しい項目を返す関数。

        Raises:
            ItemNotFoundError: 識別子が存在しない場合。
            DuplicateItemIdError: 新しい項目の識別子が他の項目と重複した場合。
            ItemIdMismatchError: 新しい項目の識別子が変わった場合。
        """

        state = self.value

        pages = [list(page) for page in state.pages or ()]
        item_ids = materialize_item_ids(
            pages=pages,
            item_ids=state.item_ids,
            get_item_id=self._get_item_id,
        )

        for page, page_ids in zip(pages, item_ids):
            if id not in page_ids:
                continue
            position = page_ids.index(id)
            new_item = update(page[position])
            new_id = self._get_item_id(new_item)
            if new_id != id:
                if any(new_id in other_ids for other_ids in item_ids):
                    raise DuplicateItemIdError(item_id=new_id, scope=DuplicateScope.UPDATE)
                raise ItemIdMismatchError(expected_id=id, actual_id=new_id)
            page[position] = new_item
            self.value = state.copy_with(pages=pages, item_ids=item_ids)
            return

        raise ItemNotFoundError(item_id=id)

    def dispose(self) -> None:
        """実行中のフェッチを取り消し、リスナーを解放する。"""

        self._logger.debug("コントローラを破棄します。")
        self.operation = None
        super().dispose()

