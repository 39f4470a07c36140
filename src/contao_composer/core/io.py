"""User-visible IO channel handed to the plugin by the host.

Every message is mirrored to the ``contao_composer.core.io`` logger so a
file log contains the same history the user saw on the terminal.
"""
from __future__ import annotations

import io as _stdio
import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)


class PluginIO:
    """Console IO with informational, error, warning and debug channels."""

    def __init__(
        self,
        stream: TextIO | None = None,
        err_stream: TextIO | None = None,
        *,
        verbose: bool = False,
    ) -> None:
        self._stream = stream
        self._err_stream = err_stream
        self.verbose = verbose

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def err_stream(self) -> TextIO:
        return self._err_stream if self._err_stream is not None else sys.stderr

    def write(self, message: str) -> None:
        logger.info(message)
        print(message, file=self.stream)

    def write_error(self, message: str) -> None:
        logger.error(message)
        print(message, file=self.err_stream)

    def warning(self, message: str) -> None:
        logger.warning(message)
        print(f"Warning: {message}", file=self.err_stream)

    def debug(self, message: str) -> None:
        logger.debug(message)
        if self.verbose:
            print(message, file=self.stream)


class BufferedIO(PluginIO):
    """PluginIO writing to in-memory buffers."""

    def __init__(self, *, verbose: bool = False) -> None:
        super().__init__(_stdio.StringIO(), _stdio.StringIO(), verbose=verbose)

    @property
    def output(self) -> str:
        return self.stream.getvalue()  # type: ignore[attr-defined]

    @property
    def errors(self) -> str:
        return self.err_stream.getvalue()  # type: ignore[attr-defined]


__all__ = ["PluginIO", "BufferedIO"]
