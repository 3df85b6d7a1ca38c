"""Tests for errchain.output.console module."""

from __future__ import annotations

import pytest

from errchain.core.chained import ChainedError
from errchain.core.specifics import ContextInitError, InvalidArgument
from errchain.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.ERROR) == "error"
        assert str(Style.CHAIN) == "chain"
        assert str(Style.DEFAULT) == "default"

    def test_all_styles_exist(self) -> None:
        expected = {"DEFAULT", "ERROR", "INFO", "DIM", "HEADER", "CHAIN"}
        assert {s.name for s in Style} == expected


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs == [OutputRecord("hello", Style.DEFAULT)]

    def test_print_with_style(self) -> None:
        console = MockConsole()
        console.print("frames", Style.DIM)
        assert console.outputs[0].style == Style.DIM

    def test_error(self) -> None:
        console = MockConsole()
        console.error("something failed")
        assert console.outputs[0].message == "error: something failed"
        assert console.has_error()

    def test_info(self) -> None:
        console = MockConsole()
        console.info("fyi")
        assert console.outputs[0] == OutputRecord("info: fyi", Style.INFO)

    def test_header_and_newline(self) -> None:
        console = MockConsole()
        console.header("Section")
        console.newline()
        assert console.messages == ["Section", ""]
        assert console.count(Style.HEADER) == 1

    def test_chain(self) -> None:
        console = MockConsole()
        head = ChainedError(ContextInitError()).extend_with(ChainedError(InvalidArgument("32")))
        console.chain(head)
        assert console.messages == [
            "invalid argument: 32",
            "  constituent: DM context not initialized",
        ]
        assert console.count(Style.CHAIN) == 2

    def test_text_and_find(self) -> None:
        console = MockConsole()
        console.print("alpha")
        console.print("beta")
        assert console.text == "alpha\nbeta"
        assert len(console.find("bet")) == 1
        assert not console.has_error()


class TestRichConsole:
    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = RichConsole()
        assert console is not None

    def test_print_does_not_interpret_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().print("[bold]literal[/bold]")
        assert "[bold]literal[/bold]" in capsys.readouterr().out

    def test_chain_renders_tree(self, capsys: pytest.CaptureFixture[str]) -> None:
        head = ChainedError(ContextInitError()).followed_by(ChainedError(InvalidArgument("32")))
        RichConsole().chain(head)
        out = capsys.readouterr().out
        assert "invalid argument: 32" in out
        assert "previous: DM context not initialized" in out
