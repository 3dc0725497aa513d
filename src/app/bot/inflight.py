"""Contador de dispatches em andamento, usado no dreno do shutdown."""

from __future__ import annotations

import threading


class InflightTracker:
    """Conta dispatches ativos e permite aguardar até zerar."""

    def __init__(self) -> None:
        self._count = 0
        self._cond = threading.Condition()

    @property
    def count(self) -> int:
        with self._cond:
            return self._count

    def enter(self) -> None:
        with self._cond:
            self._count += 1

    def exit(self) -> None:
        with self._cond:
            self._count -= 1
            if self._count <= 0:
                self._count = 0
                self._cond.notify_all()

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Bloqueia até não haver dispatch ativo. False se estourou o timeout."""
        with self._cond:
            return self._cond.wait_for(lambda: self._count == 0, timeout=timeout)
