"""An error that can point at one other error, in one of two ways.

Most error types keep a single "cause". ChainedError distinguishes:

- a *constituent* error: the lower-level failure this error further explains
  (same operation, more specific error wraps a more primitive one);
- a *previous* error: an earlier, unrelated failure that is presumably why
  the current code ran at all.

An error holds at most one relation. Linking transfers ownership: the error
returned by ``extend_with``/``followed_by`` is the new head of the chain, and
the operand is reachable only through it from then on.

The relation is exposed through Python's own chaining attributes (read from
the relation itself, so a later ``raise`` inside a handler cannot hide it), so
``traceback`` renders a constituent as "The above exception was the direct
cause of the following exception" and a previous error as "During handling of
the above exception, another exception occurred".
"""

from __future__ import annotations

from reprlib import recursive_repr
from typing import Self

from .config import active_config
from .relation import Constituent, Previous, Relation
from .snapshot import StackSnapshot, capture

__all__ = ["ChainedError"]


class ChainedError(Exception):
    """An error with specifics, a stack snapshot, and at most one relation.

    ``str()`` renders only the specifics; the relation is management baggage
    and shows up in ``repr()`` and in ``errchain.core.chain.dump``.

    Attributes:
        specifics: What went wrong (an ErrorSpecifics variant or any value
            with a message-producing ``__str__``).
    """

    def __init__(self, specifics: object) -> None:
        super().__init__(str(specifics))
        self._specifics = specifics
        self._relation: Relation | None = None

        settings = active_config().snapshot
        self._snapshot: StackSnapshot | None = None
        if settings.enabled:
            # skip the constructor chain so the innermost frame is the caller
            self._snapshot = capture(limit=settings.frame_limit, skip=1, owner=self)

    @property
    def specifics(self) -> object:
        return self._specifics

    @property
    def relation(self) -> Relation | None:
        return self._relation

    # -------- chain building --------

    def extend_with[H: ChainedError](self, head: H) -> H:
        """Make ``head`` a further explanation of this error.

        Args:
            head: A more specific error; any relation it had is replaced.

        Returns:
            ``head``, now the head of the chain.
        """
        head._link(Constituent(self))
        return head

    def followed_by[H: ChainedError](self, subsequent: H) -> H:
        """Record that ``subsequent`` happened after, and because of, this error.

        Args:
            subsequent: A later, unrelated error; any relation it had is replaced.

        Returns:
            ``subsequent``, now the head of the chain.
        """
        subsequent._link(Previous(self))
        return subsequent

    def set_constituent(self, constituent: BaseException) -> Self:
        """Set ``constituent`` as the error this one explains, in place."""
        self._link(Constituent(constituent))
        return self

    def set_previous(self, previous: BaseException) -> Self:
        """Set ``previous`` as the error that occurred before this one, in place."""
        self._link(Previous(previous))
        return self

    def _link(self, relation: Relation) -> None:
        self._relation = relation

    # -------- Python chaining attributes --------
    # raise writes the C-level slots directly; reads go through these
    # properties so traceback sees the relation even after a re-raise.

    @property
    def __cause__(self) -> BaseException | None:  # type: ignore[override]
        match self._relation:
            case Constituent(error):
                return error
            case Previous():
                return None
            case _:
                return BaseException.__cause__.__get__(self)

    @__cause__.setter
    def __cause__(self, value: BaseException | None) -> None:
        BaseException.__cause__.__set__(self, value)

    @property
    def __context__(self) -> BaseException | None:  # type: ignore[override]
        match self._relation:
            case Previous(error):
                return error
            case Constituent():
                return None
            case _:
                return BaseException.__context__.__get__(self)

    @__context__.setter
    def __context__(self, value: BaseException | None) -> None:
        BaseException.__context__.__set__(self, value)

    @property
    def __suppress_context__(self) -> bool:  # type: ignore[override]
        match self._relation:
            case Constituent():
                return True
            case Previous():
                return False
            case _:
                return BaseException.__suppress_context__.__get__(self)

    @__suppress_context__.setter
    def __suppress_context__(self, value: bool) -> None:
        BaseException.__suppress_context__.__set__(self, value)

    # -------- inspection --------

    def previous(self) -> BaseException | None:
        """The immediate previous error, if there is one."""
        match self._relation:
            case Previous(error):
                return error
            case _:
                return None

    def constituent(self) -> BaseException | None:
        """The immediate constituent error, if there is one."""
        match self._relation:
            case Constituent(error):
                return error
            case _:
                return None

    def source(self) -> BaseException | None:
        """The related error regardless of relation kind."""
        if self._relation is None:
            return None
        return self._relation.error

    def stack_snapshot(self) -> StackSnapshot | None:
        """The stack captured at construction; None when capture was disabled."""
        return self._snapshot

    # -------- rendering --------

    def __str__(self) -> str:
        return str(self._specifics)

    @recursive_repr("...")
    def __repr__(self) -> str:
        match self._relation:
            case Previous(error):
                relation = f"Previous({error!r})"
            case Constituent(error):
                relation = f"Constituent({error!r})"
            case _:
                relation = "None"
        return (
            f"{type(self).__name__}(specifics={self._specifics!r}, "
            f"relation={relation}, snapshot={self._snapshot!r})"
        )
