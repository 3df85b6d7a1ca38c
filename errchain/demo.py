"""Demonstration scenario: a failure that travels up three call levels.

``open_context`` fails because of a low-level OS error, which it wraps.
``probe_context`` passes the failure through. ``configure_device`` explains
the failure as an invalid argument, and then runs into an unrelated error of
its own, recording the explained failure as the previous error.

The resulting chain, head first:

    IoctlResultTooLarge
      previous: InvalidArgument("32")
        constituent: ContextInitError
          constituent: OSError("oh no!")
"""

from __future__ import annotations

from errchain.core.chain import downcast
from errchain.core.chained import ChainedError
from errchain.core.result import Err, Result
from errchain.core.specifics import ContextInitError, InvalidArgument, IoctlResultTooLarge

__all__ = ["open_context", "probe_context", "configure_device", "check_scenario"]


def open_context() -> Result[None, ChainedError]:
    err = OSError("oh no!")
    ours = ChainedError(ContextInitError())
    ours.set_constituent(err)
    return Err(ours)


def probe_context() -> Result[None, ChainedError]:
    return open_context()


def configure_device() -> Result[None, ChainedError]:
    cause = probe_context().expect_err("context unexpectedly opened")
    return Err(
        cause.extend_with(ChainedError(InvalidArgument("32"))).followed_by(
            ChainedError(IoctlResultTooLarge())
        )
    )


def check_scenario(head: ChainedError) -> list[str]:
    """Verify the shape of the chain built by configure_device.

    Returns:
        Descriptions of failed expectations; empty when the shape is right.
    """
    failures: list[str] = []

    if head.specifics != IoctlResultTooLarge():
        failures.append(f"head specifics are {head.specifics!r}")
    if head.constituent() is not None:
        failures.append("head has a constituent; its source should be a previous error")
    if downcast(head.source(), OSError) is not None:
        failures.append("head source downcasts to OSError")
    if head.previous() is not head.source():
        failures.append("head previous() differs from source()")

    explained = downcast(head.previous(), ChainedError)
    if explained is None:
        failures.append("head previous error is not a ChainedError")
        return failures
    if explained.specifics != InvalidArgument("32"):
        failures.append(f"previous error specifics are {explained.specifics!r}")
    if explained.previous() is not None:
        failures.append("previous error has a previous error of its own")

    context = downcast(explained.constituent(), ChainedError)
    if context is None:
        failures.append("previous error has no ChainedError constituent")
        return failures
    if context.specifics != ContextInitError():
        failures.append(f"constituent specifics are {context.specifics!r}")

    if downcast(context.source(), OSError) is None:
        failures.append("innermost source does not downcast to OSError")
    if downcast(context.source(), ChainedError) is not None:
        failures.append("innermost source downcasts to ChainedError")

    return failures
