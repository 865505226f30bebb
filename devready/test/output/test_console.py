"""Tests for devready.output.console module."""

from __future__ import annotations

from devready.output.console import ConsoleProtocol, MockConsole, Style


class TestMockConsole:
    def test_print_records_style(self) -> None:
        console = MockConsole()
        console.print("Nodejs: installed", Style.SUCCESS)
        assert console.messages == ["Nodejs: installed"]
        assert console.count(Style.SUCCESS) == 1

    def test_error(self) -> None:
        console = MockConsole()
        console.error("unknown dependency: rust")
        assert console.has_error()
        assert console.text == "error: unknown dependency: rust"

    def test_raw_is_verbatim(self) -> None:
        console = MockConsole()
        console.raw('[{"installed": true}]')
        assert console.messages == ['[{"installed": true}]']
        assert not console.has_error()

    def test_find(self) -> None:
        console = MockConsole()
        console.header("Dependencies")
        console.print("CocoaPods: missing", Style.ERROR)
        console.print("  hint: Install CocoaPods", Style.DIM)
        assert len(console.find("CocoaPods")) == 2

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.success("done")
        assert isinstance(console, MockConsole)
        assert console.outputs[0].message == "OK done"
