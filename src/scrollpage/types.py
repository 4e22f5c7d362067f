"""公開型と内部共通データ構造。"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

from scrollpage.enums import FaultKind

if TYPE_CHECKING:
    from scrollpage.state import PagingState

NextPageKeyCallback: TypeAlias = Callable[["PagingState[Any, Any]"], Any]
"""現在状態から次ページのキーを求める。``None`` を返すと終端。"""

FetchPageCallback: TypeAlias = Callable[[Any], Sequence[Any] | Awaitable[Sequence[Any]]]
"""ページキーから項目列を取得する。同期・非同期のどちらでもよい。"""

ItemIdCallback: TypeAlias = Callable[[Any], str]
"""項目から一意な識別子を求める。"""

Listener: TypeAlias = Callable[[Any], None]
"""値の再代入時に新しい値を受け取るリスナー。"""


@dataclass(slots=True, frozen=True)
class Fault:
    """分類済みの障害。

    Attributes:
        kind: 障害分類。
        error: 捕捉した例外。
    """

    kind: FaultKind
    error: BaseException

    @property
    def should_propagate(self) -> bool:
        """呼び出し元へ再送出すべきか。"""

        return self.kind is FaultKind.DEFECT
