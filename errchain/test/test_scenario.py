"""End-to-end chain scenario: a wrapped OS error followed by a later failure."""

from __future__ import annotations

from errchain.core.chain import downcast
from errchain.core.chained import ChainedError
from errchain.core.result import Err
from errchain.core.specifics import ContextInitError, InvalidArgument, IoctlResultTooLarge
from errchain.demo import check_scenario, configure_device, open_context, probe_context


def _build() -> tuple[ChainedError, OSError]:
    io_error = OSError("oh no!")
    e1 = ChainedError(ContextInitError())
    e1.set_constituent(io_error)
    e2 = ChainedError(InvalidArgument("32"))
    e3 = ChainedError(IoctlResultTooLarge())
    return e1.extend_with(e2).followed_by(e3), io_error


def test_head_previous_is_invalid_argument() -> None:
    head, _ = _build()
    previous = downcast(head.previous(), ChainedError)
    assert previous is not None
    assert previous.specifics == InvalidArgument("32")


def test_head_has_no_constituent() -> None:
    head, _ = _build()
    assert head.constituent() is None


def test_previous_constituent_is_context_init() -> None:
    head, _ = _build()
    previous = downcast(head.previous(), ChainedError)
    assert previous is not None
    context = downcast(previous.constituent(), ChainedError)
    assert context is not None
    assert context.specifics == ContextInitError()


def test_innermost_source_is_foreign() -> None:
    head, io_error = _build()
    previous = downcast(head.previous(), ChainedError)
    assert previous is not None
    context = downcast(previous.constituent(), ChainedError)
    assert context is not None

    assert downcast(context.source(), OSError) is io_error
    assert downcast(context.source(), ChainedError) is None


def test_head_source_is_not_foreign() -> None:
    head, _ = _build()
    assert downcast(head.source(), OSError) is None


def test_message_is_only_head_specifics() -> None:
    head, _ = _build()
    assert str(head) == str(IoctlResultTooLarge())


class TestDemoFunctions:
    def test_open_context_fails(self) -> None:
        result = open_context()
        assert isinstance(result, Err)
        assert result.error.specifics == ContextInitError()
        assert isinstance(result.error.constituent(), OSError)

    def test_probe_context_passes_through(self) -> None:
        result = probe_context()
        assert isinstance(result, Err)
        assert result.error.specifics == ContextInitError()

    def test_configure_device_shape(self) -> None:
        head = configure_device().expect_err("configure_device should fail")
        assert check_scenario(head) == []

    def test_check_scenario_flags_wrong_shape(self) -> None:
        wrong = ChainedError(IoctlResultTooLarge()).set_constituent(OSError("oh no!"))
        failures = check_scenario(wrong)
        assert "head has a constituent; its source should be a previous error" in failures
        assert "head previous error is not a ChainedError" in failures

    def test_check_scenario_flags_wrong_specifics(self) -> None:
        head = (
            ChainedError(ContextInitError())
            .extend_with(ChainedError(InvalidArgument("33")))
            .followed_by(ChainedError(IoctlResultTooLarge()))
        )
        failures = check_scenario(head)
        assert any("InvalidArgument(description='33')" in f for f in failures)
        assert "innermost source does not downcast to OSError" in failures
