"""
Structural code builder.

Assembles brace-scoped, indented source text. Block bodies are passed in as
callbacks that receive the builder itself, so nested structure is written as
nested function calls and the builder alone tracks depth and brace balance::

    b = CodeBuilder()
    b.open_scope("public class Foo").add(lambda b: b("int x;"))
    str(b)  # 'public class Foo {\\n  int x;\\n}'

Nothing is emitted by ``open_scope`` itself. A composer that never receives
a body is closed as an empty block (``header {`` / ``}``) by the next
operation on the builder, including ``render``.
"""

from typing import Callable, Optional

from .buffer import DEFAULT_INDENT_UNIT, LineBuffer
from ...logging_config import get_logger

logger = get_logger(__name__)

OPEN_BRACE = "{"
CLOSE_BRACE = "}"


class BuilderError(Exception):
    """Exception raised when the builder is used incorrectly."""

    pass


class ScopeComposer:
    """Runs the body of one scope and closes it exactly once.

    Returned by :meth:`CodeBuilder.open_scope` (and :meth:`CodeBuilder.flat`
    for file-level roots). The body is supplied either through :meth:`add`
    or by using the composer as a context manager, before anything else is
    done with the builder.
    """

    def __init__(
        self,
        builder: "CodeBuilder",
        opening: Optional[str] = None,
        closing: Optional[str] = CLOSE_BRACE,
    ):
        self._builder = builder
        self._opening = opening
        self._closing = closing
        self._parent_depth = builder.depth
        self._used = False
        self._closed_empty = False

    def add(self, callback: Callable[["CodeBuilder"], None]) -> "CodeBuilder":
        """
        Open the scope, run its body and close it.

        Args:
            callback: Called with the builder; may emit lines and open
                further scopes on it

        Returns:
            The builder, for chaining

        Raises:
            BuilderError: If this composer was already used or already
                closed as an empty block
        """
        self._enter()
        failed = True
        try:
            callback(self._builder)
            failed = False
        finally:
            self._close(failed)
        return self._builder

    def __enter__(self) -> "CodeBuilder":
        self._enter()
        return self._builder

    def __exit__(self, exc_type, exc, tb):
        self._close(exc_type is not None)
        return False

    def _enter(self):
        if self._closed_empty:
            raise BuilderError(
                "Scope was closed empty by a later builder call; "
                "supply its body right after open_scope"
            )
        if self._used:
            raise BuilderError("Scope body was already supplied for this scope")
        self._used = True

        builder = self._builder
        builder._release(self)
        if self._opening is not None:
            builder.emit_line(self._opening)
            builder._depth += 1

    def _close(self, failed: bool):
        builder = self._builder
        builder._flush_pending()
        # Depth is restored even on failure; the closing brace is not, so a
        # failed unit stays visibly incomplete.
        builder._depth = self._parent_depth
        if self._closing is not None and not failed:
            builder.emit_line(self._closing)

    def _close_empty(self):
        self._closed_empty = True
        buffer = self._builder._buffer
        buffer.append(self._opening, self._parent_depth)
        buffer.append(self._closing, self._parent_depth)


class CodeBuilder:
    """Emits lines and brace-delimited scopes into a :class:`LineBuffer`."""

    def __init__(self, indent_unit: str = DEFAULT_INDENT_UNIT):
        self._buffer = LineBuffer()
        self._depth = 0
        self._pending: Optional[ScopeComposer] = None
        self.indent_unit = indent_unit

    @property
    def depth(self) -> int:
        """Current indentation depth."""
        return self._depth

    @property
    def buffer(self) -> LineBuffer:
        self._flush_pending()
        return self._buffer

    def emit_line(self, text: str = "") -> "CodeBuilder":
        """Append text at the current depth."""
        self._flush_pending()
        self._buffer.append(text, self._depth)
        return self

    __call__ = emit_line

    def open_scope(self, header: str = "") -> ScopeComposer:
        """
        Prepare a brace-delimited block at the current depth.

        ``header {`` is emitted and the depth raised when the returned
        composer receives its body; the block is closed once the body has
        run. A composer left unused is closed as an empty block.

        Args:
            header: Text placed before the opening brace

        Returns:
            Composer that accepts the block body
        """
        self._flush_pending()
        header = header.rstrip()
        composer = ScopeComposer(self, f"{header} {OPEN_BRACE}" if header else OPEN_BRACE)
        self._pending = composer
        return composer

    def flat(self) -> ScopeComposer:
        """Return a composer that runs a body at the current depth, unbraced."""
        self._flush_pending()
        return ScopeComposer(self, closing=None)

    def discard(self):
        """Throw away everything emitted so far."""
        self._flush_pending()
        logger.debug("Discarding %d buffered line(s)", len(self._buffer))
        self._buffer.clear()
        self._depth = 0

    def render(self) -> str:
        self._flush_pending()
        return self._buffer.render(self.indent_unit)

    def __str__(self) -> str:
        return self.render()

    def _release(self, composer: ScopeComposer):
        if self._pending is composer:
            self._pending = None
        else:
            self._flush_pending()

    def _flush_pending(self):
        pending, self._pending = self._pending, None
        if pending is not None:
            logger.debug("Closing unused scope %r as an empty block", pending._opening)
            pending._close_empty()


def build_text(
    callback: Callable[[CodeBuilder], None], indent_unit: str = DEFAULT_INDENT_UNIT
) -> str:
    """Run ``callback`` on a fresh builder and return the rendered text."""
    builder = CodeBuilder(indent_unit)
    builder.flat().add(callback)
    return builder.render()
