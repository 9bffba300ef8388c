"""Protocols (interfaces) consumed by the core layer.

The core never opens files or streams itself.  Text output is written to
whatever the caller passes in, as long as it satisfies :class:`TextSink`
structurally (``io.StringIO``, ``sys.stdout``, an open text file, ...).
"""

from __future__ import annotations

from typing import Protocol


class TextSink(Protocol):
    """Contract for objects that accept rendered text."""

    def write(self, text: str, /) -> object:
        """Append *text* to the sink.

        Any exception raised here is propagated to the caller unchanged;
        the core never retries a failed write.
        """
        ...  # pragma: no cover
