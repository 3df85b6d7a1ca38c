"""Generic inspection of error chains.

These helpers accept any exception. For a ChainedError they follow its
relation; for anything else they follow Python's own chaining the way
``traceback`` does (``__cause__`` first, then an unsuppressed
``__context__``).
"""

from __future__ import annotations

from collections.abc import Iterator

from .chained import ChainedError
from .relation import Constituent, Previous, Relation

__all__ = ["source_of", "relation_of", "walk", "find", "downcast", "dump"]


def relation_of(error: BaseException) -> Relation | None:
    """The relation ``error`` has to its source, if any.

    Foreign exceptions map ``raise ... from`` to Constituent and implicit
    chaining to Previous.
    """
    if isinstance(error, ChainedError):
        return error.relation
    if error.__cause__ is not None:
        return Constituent(error.__cause__)
    if error.__context__ is not None and not error.__suppress_context__:
        return Previous(error.__context__)
    return None


def source_of(error: BaseException) -> BaseException | None:
    """The related error regardless of relation kind."""
    relation = relation_of(error)
    if relation is None:
        return None
    return relation.error


def walk(error: BaseException) -> Iterator[BaseException]:
    """Yield ``error`` and then each successive source.

    Stops early if an error is reached a second time.
    """
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = source_of(current)


def downcast[T: BaseException](error: BaseException | None, kind: type[T]) -> T | None:
    """Narrow a generic error reference to ``kind``.

    Args:
        error: Any error reference, typically from ``previous()``,
            ``constituent()`` or ``source()``.
        kind: The concrete exception class to recover.

    Returns:
        ``error`` if it is an instance of ``kind``, otherwise None.
    """
    if isinstance(error, kind):
        return error
    return None


def find[T: BaseException](error: BaseException, kind: type[T]) -> T | None:
    """The first error in the chain that is an instance of ``kind``."""
    for item in walk(error):
        found = downcast(item, kind)
        if found is not None:
            return found
    return None


def dump(error: BaseException, *, indent: str = "  ") -> str:
    """Render a structural dump of the whole chain.

    Each node lists its class, message, relation kind and, for a
    ChainedError, the stack snapshot captured when it was built. Nodes are
    indented one level per link.

    Args:
        error: The head of the chain.
        indent: Indentation added per link.

    Returns:
        Multi-line text, without a trailing newline.
    """
    lines: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = error
    depth = 0

    while current is not None:
        pad = indent * depth
        if id(current) in seen:
            lines.append(f"{pad}<cycle: {type(current).__name__} already shown>")
            break
        seen.add(id(current))

        lines.append(f"{pad}{type(current).__name__}: {current}")
        if isinstance(current, ChainedError):
            lines.append(f"{pad}{indent}specifics: {current.specifics!r}")
            snapshot = current.stack_snapshot()
            if snapshot is None:
                lines.append(f"{pad}{indent}snapshot: <not captured>")
            else:
                lines.append(f"{pad}{indent}snapshot: {len(snapshot)} frames")
                for frame_line in snapshot.format().rstrip("\n").splitlines():
                    lines.append(f"{pad}{indent}{indent}{frame_line}")

        relation = relation_of(current)
        if relation is None:
            break
        lines.append(f"{pad}{indent}{relation.kind}:")
        current = relation.error
        depth += 1

    return "\n".join(lines)
