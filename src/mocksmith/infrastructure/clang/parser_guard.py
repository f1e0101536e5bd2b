#!/usr/bin/env python3

"""Process-wide exclusive access to the C++ parser.

libclang is only used by one Mocksmith instance at a time. A guard either
fails immediately when the parser is busy or blocks until it is released.
A holder that fails with an unexpected exception leaves the parser marked
as poisoned: fail-fast acquisition then reports the failure, while blocking
acquisition clears the mark and continues.
"""

import threading
from types import TracebackType

from ...domain.exceptions import MocksmithError, ParserBusyError, ParserPoisonedError
from ..logging import get_logger

logger = get_logger(__name__)

_PARSER_LOCK = threading.Lock()


class ParserGuard:
    """Holds the process-wide parser lock until released."""

    _poisoned = False

    def __init__(self) -> None:
        self._held = False

    @classmethod
    def acquire(cls, blocking: bool = False) -> "ParserGuard":
        """Acquire exclusive access to the parser.

        Args:
            blocking: Wait for the parser instead of failing when it is busy

        Returns:
            Guard holding the parser

        Raises:
            ParserBusyError: If not blocking and the parser is in use
            ParserPoisonedError: If not blocking and a previous holder failed
        """
        if not _PARSER_LOCK.acquire(blocking=blocking):
            raise ParserBusyError()

        if cls._poisoned:
            if not blocking:
                _PARSER_LOCK.release()
                raise ParserPoisonedError()
            logger.warning("Previous parser user failed, clearing failed state")
            cls.clear_poison()

        guard = cls()
        guard._held = True
        return guard

    @classmethod
    def clear_poison(cls) -> None:
        cls._poisoned = False

    @classmethod
    def is_poisoned(cls) -> bool:
        return cls._poisoned

    @property
    def held(self) -> bool:
        return self._held

    def release(self, failed: bool = False) -> None:
        """Release the parser; `failed` marks it as poisoned for the next user."""
        if not self._held:
            return
        if failed:
            ParserGuard._poisoned = True
        self._held = False
        _PARSER_LOCK.release()

    def __enter__(self) -> "ParserGuard":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        # Reported errors leave the parser usable, anything else poisons it
        failed = exc_type is not None and not issubclass(exc_type, MocksmithError)
        self.release(failed=failed)
