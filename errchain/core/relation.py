"""The relation a linked error has to the error that holds it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

__all__ = ["Previous", "Constituent", "Relation"]


@dataclass(frozen=True, slots=True, eq=False)
class Previous:
    """The error occurred before the holder.

    It is not about the same operation; it is presumably the reason the code
    that produced the holder ran at all.
    """

    error: BaseException

    @property
    def kind(self) -> Literal["previous"]:
        return "previous"


@dataclass(frozen=True, slots=True, eq=False)
class Constituent:
    """The error is further explained or extended by the holder."""

    error: BaseException

    @property
    def kind(self) -> Literal["constituent"]:
        return "constituent"


type Relation = Previous | Constituent
