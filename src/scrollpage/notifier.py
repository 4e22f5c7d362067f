"""単一値の監視スロット。"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from scrollpage.errors import ControllerDisposedError
from scrollpage.types import Listener

logger = logging.getLogger(__name__)

V = TypeVar("V")


class ValueNotifier(Generic[V]):
    """現在値を保持し、再代入のたびにリスナーへ同期通知する。

    同値の再代入でも通知する。リスナーは登録順に ``listener(value)`` で呼ばれる。
    """

    def __init__(self, value: V) -> None:
        self._value = value
        self._listeners: list[Listener] = []
        self._disposed = False

    @property
    def value(self) -> V:
        """現在値。"""

        return self._value

    @value.setter
    def value(self, new_value: V) -> None:
        self._ensure_not_disposed()
        self._value = new_value
        self.notify_listeners()

    @property
    def has_listeners(self) -> bool:
        """リスナーが登録されているか。"""

        return bool(self._listeners)

    @property
    def is_disposed(self) -> bool:
        """破棄済みか。"""

        return self._disposed

    def add_listener(self, listener: Listener) -> None:
        """リスナーを登録する。

        Raises:
            ControllerDisposedError: 破棄済みの場合。
        """

        self._ensure_not_disposed()
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """リスナーを解除する。未登録なら何もしない。"""

        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def notify_listeners(self) -> None:
        """現在値を全リスナーへ通知する。

        通知中の登録・解除は次回の通知から反映される。
        リスナーの例外はログに記録し、残りのリスナーへの通知を続ける。
        """

        value = self._value
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception:
                logger.exception("リスナーの呼び出しで例外が発生しました: %r", listener)

    def dispose(self) -> None:
        """リスナーを解放し、以降の再代入を禁止する。"""

        self._listeners.clear()
        self._disposed = True

    def _ensure_not_disposed(self) -> None:
        if self._disposed:
            raise ControllerDisposedError(f"{type(self).__name__} は破棄済みです。")
