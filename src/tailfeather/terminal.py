"""Scoped terminal state: the active color is reset on every exit path."""
from __future__ import annotations

import logging
import signal
from types import FrameType, TracebackType
from typing import Any, Dict, Optional, Type

from tailfeather.renderer import Renderer

LOG = logging.getLogger(__name__)

_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class Interrupted(KeyboardInterrupt):
    """Raised from the signal handler when SIGINT or SIGTERM arrives."""

    def __init__(self, signum: int) -> None:
        super().__init__(signum)
        self.signum = signum


def _raise_interrupted(signum: int, frame: Optional[FrameType]) -> None:
    raise Interrupted(signum)


class TerminalSession:
    """Context manager that owns the renderer's color state.

    On exit the renderer is reset exactly once. An interrupt is absorbed: the
    color is reset, a newline ends the partial line and the caller carries on
    as if input had ended.
    """

    def __init__(self, renderer: Renderer, *, install_signals: bool = True) -> None:
        self.renderer = renderer
        self.install_signals = install_signals
        self.interrupted = False
        self._restored = False
        self._previous: Dict[int, Any] = {}

    def __enter__(self) -> "TerminalSession":
        if self.install_signals:
            for signum in _SIGNALS:
                self._previous[signum] = signal.signal(signum, _raise_interrupted)
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> bool:
        # A second signal must not interrupt the reset itself.
        for signum in self._previous:
            signal.signal(signum, signal.SIG_IGN)
        try:
            if isinstance(exc, KeyboardInterrupt):
                self.interrupted = True
                LOG.info("interrupted by signal %s", getattr(exc, "signum", signal.SIGINT))
                self.restore(newline=True)
                return True
            self.restore()
            return False
        finally:
            self._uninstall()

    def _uninstall(self) -> None:
        while self._previous:
            signum, handler = self._previous.popitem()
            signal.signal(signum, handler)

    def restore(self, *, newline: bool = False) -> None:
        """Reset the terminal color; later calls are no-ops."""
        if self._restored:
            return
        self._restored = True
        try:
            self.renderer.reset()
            if newline:
                self.renderer.stream.write("\n")
                self.renderer.stream.flush()
        except BrokenPipeError:
            LOG.debug("output closed before the terminal could be reset")


__all__ = ["Interrupted", "TerminalSession"]
