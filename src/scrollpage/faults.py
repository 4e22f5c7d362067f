"""フェッチ障害の分類器。"""

from __future__ import annotations

from dataclasses import dataclass

from scrollpage.config import DEFAULT_DEFECT_TYPES
from scrollpage.enums import FaultKind
from scrollpage.types import Fault


@dataclass(slots=True)
class FaultClassifier:
    """例外を回復可能／不具合の二種に分類する。"""

    defect_types: tuple[type[BaseException], ...] = DEFAULT_DEFECT_TYPES

    def classify(self, error: BaseException) -> Fault:
        """例外に分類タグを付与する。

        ``defect_types`` のいずれかに該当する例外と、``Exception`` 以外の
        ``BaseException`` は不具合とみなす。

        Args:
            error: 捕捉した例外。

        Returns:
            分類結果。
        """

        if isinstance(error, self.defect_types) or not isinstance(error, Exception):
            return Fault(kind=FaultKind.DEFECT, error=error)
        return Fault(kind=FaultKind.RECOVERABLE, error=error)
