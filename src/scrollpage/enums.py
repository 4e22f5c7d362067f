"""列挙型定義。"""

from __future__ import annotations

from enum import StrEnum


class FaultKind(StrEnum):
    """フェッチ中に発生した障害の分類。

    Attributes:
        RECOVERABLE: 通常のアプリケーション例外。状態へ記録して終了する。
        DEFECT: プログラム不具合。状態へ記録したうえで呼び出し元へ再送出する。
    """

    RECOVERABLE = "recoverable"
    DEFECT = "defect"


class DuplicateScope(StrEnum):
    """識別子重複の検出箇所。

    Attributes:
        SAME_PAGE: 同一ページ内での重複。
        ACROSS_PAGES: 既存ページとの重複。
        INSERT: 手動挿入時の重複。
        UPDATE: 項目更新時の重複。
    """

    SAME_PAGE = "same_page"
    ACROSS_PAGES = "across_pages"
    INSERT = "insert"
    UPDATE = "update"


class PagingStatus(StrEnum):
    """状態から導出される表示ステータス。

    Attributes:
        LOADING_FIRST_PAGE: 最初のページを待機中。
        ONGOING: 項目があり、続きのページも存在する。
        COMPLETED: 項目があり、続きのページは存在しない。
        NO_ITEMS_FOUND: 最後まで読み込んだが項目がない。
        FIRST_PAGE_ERROR: 項目がないままエラーになった。
        SUBSEQUENT_PAGE_ERROR: 項目があり、後続ページでエラーになった。
    """

    LOADING_FIRST_PAGE = "loading_first_page"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    NO_ITEMS_FOUND = "no_items_found"
    FIRST_PAGE_ERROR = "first_page_error"
    SUBSEQUENT_PAGE_ERROR = "subsequent_page_error"
