# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Logging interface for semverkit.

Library modules never print directly. They log through the process-wide
logger, which is silent until a caller installs a printing one, so the
range compiler and the manifest checker can explain themselves without
depending on the CLI.

Output levels:
- Step: always printed (progress through a manifest)
- Verbose: printed when verbose mode is enabled
- Debug: printed when debug mode is enabled (implies verbose)

Library code does not hold a logger. It holds a Channel, a prefix bound
to whatever logger is global at the time of the call:

- RANGE: range compilation (clause, accepting normalizer, canonical form)
- MANIFEST: manifest loading and constraint checks

Example:
    Trace a compilation:
        ```python
        from semverkit.logging import get_logger, use_logger
        from semverkit.ranges import compile_range

        with use_logger(get_logger(debug=True)):
            compile_range("^1.2.3 || 2.x")
        # [RANGE] Clause '^1.2.3' accepted by 'caret': >=1.2.3 <2.0.0
        # ...
        ```
"""

from __future__ import annotations

from contextlib import contextmanager
import sys
from typing import IO, Iterator, Protocol


class Logger(Protocol):
    """Protocol for logger implementations."""

    def step(self, step: int, total: int, message: str) -> None:
        """Report progress, e.g. one constraint out of a manifest.

        Args:
            step: Current step number (1-based).
            total: Total number of steps.
            message: Step description.
        """
        ...

    def verbose(self, prefix: str, message: str) -> None:
        ...

    def debug(self, prefix: str, message: str) -> None:
        ...


class DefaultLogger:
    """Logger that writes ``[PREFIX] message`` lines to a text stream.

    Args:
        verbose: If True, print verbose messages.
        debug: If True, print debug messages (implies verbose).
        stream: Destination. None means ``sys.stdout`` as it is at the
            time of each write.
    """

    def __init__(
        self, verbose: bool = False, debug: bool = False, stream: IO[str] | None = None
    ) -> None:
        self.show_verbose = verbose or debug
        self.show_debug = debug
        self._stream = stream

    def _write(self, line: str) -> None:
        print(line, file=self._stream or sys.stdout)

    def step(self, step: int, total: int, message: str) -> None:
        self._write(f"[{step}/{total}] {message}")

    def verbose(self, prefix: str, message: str) -> None:
        if self.show_verbose:
            self._write(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        if self.show_debug:
            self._write(f"[{prefix}] {message}")


class SilentLogger:
    """Logger that drops everything; the initial global logger."""

    def step(self, step: int, total: int, message: str) -> None:
        pass

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass


_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Build a stdout logger for the given CLI verbosity flags."""
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Install ``logger`` for every library function that logs.

    Prefer use_logger() when the change should not outlive a block.
    """
    global _global_logger
    _global_logger = logger


@contextmanager
def use_logger(logger: Logger) -> Iterator[Logger]:
    """Install ``logger`` for the duration of a ``with`` block.

    The previous global logger is restored on exit, also when the block
    raises.
    """
    previous = get_global_logger()
    set_global_logger(logger)
    try:
        yield logger
    finally:
        set_global_logger(previous)


class Channel:
    """A log prefix bound to the global logger at call time.

    Modules create one at import time (``_log = Channel("RANGE")``) and
    keep logging correctly after the CLI or a test swaps the global logger.
    """

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def verbose(self, message: str) -> None:
        _global_logger.verbose(self.prefix, message)

    def debug(self, message: str) -> None:
        _global_logger.debug(self.prefix, message)

    def step(self, step: int, total: int, message: str) -> None:
        _global_logger.step(step, total, message)
