"""scrollpage 公開API。"""

from scrollpage.config import DEFAULT_DEFECT_TYPES, ControllerConfig
from scrollpage.controller import PagingController
from scrollpage.enums import DuplicateScope, FaultKind, PagingStatus
from scrollpage.errors import (
    ControllerDisposedError,
    DuplicateItemIdError,
    ItemIdMismatchError,
    ItemIndexOutOfRangeError,
    ItemNotFoundError,
    ScrollpageError,
)
from scrollpage.faults import FaultClassifier
from scrollpage.notifier import ValueNotifier
from scrollpage.state import PagingState
from scrollpage.types import Fault

__all__ = [
    "DEFAULT_DEFECT_TYPES",
    "ControllerConfig",
    "ControllerDisposedError",
    "DuplicateItemIdError",
    "DuplicateScope",
    "Fault",
    "FaultClassifier",
    "FaultKind",
    "ItemIdMismatchError",
    "ItemIndexOutOfRangeError",
    "ItemNotFoundError",
    "PagingController",
    "PagingState",
    "PagingStatus",
    "ScrollpageError",
    "ValueNotifier",
]
