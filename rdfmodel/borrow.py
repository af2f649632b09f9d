"""Borrow scopes — validity tracking for zero-copy views.

Every owned value in this package has a borrowed twin (``NamedNodeRef``,
``TermRef``, ``QuadRef``, ...) returned by ``as_ref()``. A view never copies
its source's payload; it only points at it.

Two kinds of view exist:

  Unscoped views — ``value.as_ref()``. They hold an ordinary reference to
  the payload and stay valid for as long as they are reachable.

  Scoped views — ``with borrowed(value) as view: ...``. The view is bound to
  a ``Lease`` that is released when the block exits. Any payload access on
  the view afterwards, or on a view derived from it field by field, raises
  ``ReleasedViewError``. ``into_owned()`` called inside the block produces an
  owned value with no tie to the lease.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator


logger = logging.getLogger(__name__)


class ReleasedViewError(RuntimeError):
    """A view was used after the borrow scope it was created in ended."""


# ---------------------------------------------------------------------------
# Lease — the validity token shared by every view of one borrow scope
# ---------------------------------------------------------------------------

class Lease:
    """Validity token for the views handed out by one ``borrowed()`` block."""

    __slots__ = ("_active", "source")

    def __init__(self, source: str = "") -> None:
        self._active = True
        self.source = source

    @property
    def active(self) -> bool:
        return self._active

    def check(self) -> None:
        if not self._active:
            raise ReleasedViewError(
                f"view of {self.source or 'a value'} used after its borrow scope ended"
            )

    def release(self) -> None:
        if self._active:
            self._active = False
            logger.debug("Released borrow scope of %s", self.source or "a value")

    def __repr__(self) -> str:
        state = "active" if self._active else "released"
        return f"Lease({self.source}, {state})"


# ---------------------------------------------------------------------------
# View — immutable handle base for borrowed values
# ---------------------------------------------------------------------------

class View:
    """Base for slotted, immutable view handles.

    Subclasses store their payload in private slots and read it back through
    accessors that call ``_check()`` first.
    """

    __slots__ = ("_lease",)

    def __init__(self, lease: Lease | None = None) -> None:
        object.__setattr__(self, "_lease", lease)

    @property
    def lease(self) -> Lease | None:
        """The lease this view is bound to, or None for an unscoped view."""
        return self._lease

    @property
    def released(self) -> bool:
        return self._lease is not None and not self._lease.active

    def _check(self) -> None:
        if self._lease is not None:
            self._lease.check()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Views are read-only handles: copying one yields the same handle.
    def __copy__(self) -> View:
        return self

    def __deepcopy__(self, memo: dict) -> View:
        return self

    def __reduce__(self) -> tuple:
        """Pickle the owned payload; unpickling yields an unscoped view of it.

        A view whose scope has ended raises ``ReleasedViewError`` here.
        """
        return (_view_of, (self.into_owned(),))


def _view_of(owned: Any) -> View:
    return owned.as_ref()


@contextmanager
def borrowed(value: Any) -> Iterator[Any]:
    """Borrow ``value`` for the duration of a ``with`` block.

    ``value`` is any owned type of this package (anything with an
    ``as_ref(lease=...)`` method). The yielded view is released on exit,
    including when the block raises.
    """
    lease = Lease(type(value).__name__)
    try:
        yield value.as_ref(lease=lease)
    finally:
        lease.release()
