"""設定値定義。"""

from __future__ import annotations

from dataclasses import dataclass

from scrollpage.errors import DuplicateItemIdError

DEFAULT_DEFECT_TYPES: tuple[type[BaseException], ...] = (
    TypeError,
    AttributeError,
    NameError,
    AssertionError,
    NotImplementedError,
    RecursionError,
    IndexError,
    KeyError,
    DuplicateItemIdError,
)
"""不具合として再送出する既定の例外型。

``IndexError`` と ``KeyError`` はコールバック内の添字誤りとして扱う。
取得処理の失敗として記録したい場合は ``ControllerConfig.defect_types`` で外す。
"""


@dataclass(slots=True)
class ControllerConfig:
    """コントローラ共通設定。

    Attributes:
        defect_types: 不具合（再送出対象）として扱う例外型。
        logger_name: ログ出力に使うロガー名。未指定時はモジュール名。
    """

    defect_types: tuple[type[BaseException], ...] = DEFAULT_DEFECT_TYPES
    logger_name: str | None = None
