"""例外定義。"""

from __future__ import annotations

from scrollpage.enums import DuplicateScope


class ScrollpageError(Exception):
    """ライブラリ例外の基底クラス。

    Attributes:
        origin: 例外発生元。``controller`` / ``validation`` / ``notifier`` のいずれか。
    """

    def __init__(self, message: str, *, origin: str) -> None:
        super().__init__(message)
        self.origin = origin


class DuplicateItemIdError(ScrollpageError):
    """項目識別子の重複。

    Attributes:
        item_id: 重複した識別子。
        scope: 重複の検出箇所。
    """

    def __init__(self, *, item_id: str, scope: DuplicateScope) -> None:
        if scope is DuplicateScope.SAME_PAGE:
            message = f'同一ページ内で識別子 "{item_id}" が重複しています。'
        elif scope is DuplicateScope.ACROSS_PAGES:
            message = f'識別子 "{item_id}" は既存ページに存在します。'
        elif scope is DuplicateScope.UPDATE:
            message = f'更新後の識別子 "{item_id}" は他の項目と重複しています。'
        else:
            message = f'識別子 "{item_id}" は既に存在します。'
        super().__init__(message, origin="validation")
        self.item_id = item_id
        self.scope = scope


class ItemIndexOutOfRangeError(ScrollpageError, IndexError):
    """挿入位置が範囲外。

    Attributes:
        index: 指定された位置。
        start: 許容範囲の下限。
        end: 許容範囲の上限（総項目数）。
    """

    def __init__(self, *, index: int, start: int, end: int) -> None:
        super().__init__(
            f"挿入位置が範囲外です: index={index}, range=[{start}, {end}]",
            origin="validation",
        )
        self.index = index
        self.start = start
        self.end = end


class ItemNotFoundError(ScrollpageError, LookupError):
    """指定識別子の項目が存在しない。"""

    def __init__(self, *, item_id: str) -> None:
        super().__init__(f'識別子 "{item_id}" の項目が見つかりません。', origin="controller")
        self.item_id = item_id


class ItemIdMismatchError(ScrollpageError):
    """更新後の項目が元と異なる識別子を返した。"""

    def __init__(self, *, expected_id: str, actual_id: str) -> None:
        super().__init__(
            f'更新後の識別子が一致しません: expected="{expected_id}", actual="{actual_id}"',
            origin="validation",
        )
        self.expected_id = expected_id
        self.actual_id = actual_id


class ControllerDisposedError(ScrollpageError, RuntimeError):
    """破棄済みの通知器・コントローラへの操作。"""

    def __init__(self, message: str = "破棄済みのため操作できません。") -> None:
        super().__init__(message, origin="notifier")
