"""Stack snapshots captured when an error is constructed."""

from __future__ import annotations

import sys
import traceback
from dataclasses import dataclass

__all__ = ["StackSnapshot", "capture"]


@dataclass(frozen=True, slots=True)
class StackSnapshot:
    """Call stack at the moment an error was built, outermost frame first.

    Attributes:
        frames: The captured frames, as returned by ``traceback.extract_stack``.
    """

    frames: traceback.StackSummary

    def __len__(self) -> int:
        return len(self.frames)

    @property
    def innermost(self) -> traceback.FrameSummary | None:
        """The construction-site frame, or None for an empty snapshot."""
        if not self.frames:
            return None
        return self.frames[-1]

    def format(self) -> str:
        """Render the frames the way ``traceback.print_stack`` does."""
        return "".join(self.frames.format())

    def __repr__(self) -> str:
        site = self.innermost
        if site is None:
            return "<StackSnapshot 0 frames>"
        return f"<StackSnapshot {len(self)} frames at {site.filename}:{site.lineno}>"


def capture(limit: int | None = None, skip: int = 0, owner: object | None = None) -> StackSnapshot:
    """Capture the caller's stack.

    Args:
        limit: Keep at most this many frames, innermost last. None keeps all.
        skip: Extra frames to drop above the caller (e.g. constructor frames).
        owner: When given, also drop any ``__init__`` frames whose ``self`` is
            ``owner``, so subclass constructors chaining up through
            ``super().__init__`` do not count as the construction site.

    Returns:
        A snapshot whose innermost frame is the caller's caller ``skip`` levels up.
    """
    # +1 drops capture() itself
    frame = sys._getframe(skip + 1)
    if owner is not None:
        while (
            frame.f_back is not None
            and frame.f_code.co_name == "__init__"
            and frame.f_locals.get("self") is owner
        ):
            frame = frame.f_back
    frames = traceback.extract_stack(frame, limit=limit)
    return StackSnapshot(frames=frames)
