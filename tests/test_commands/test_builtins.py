"""Tests for the built-in commands, called directly as handlers."""

import pytest

from just_tcl.errors import UnknownVariableError, WrongArgsError
from just_tcl.interpreter import BUILTINS, Interpreter, Procedure


@pytest.fixture
def interp():
    return Interpreter()


async def call(interp, name, words):
    """Call a builtin the way dispatch does: inside a frame of its own."""
    with interp.state.frames.pushed():
        return await interp.commands[name].call(interp, words)


class TestSet:
    """Test the set command."""

    @pytest.mark.asyncio
    async def test_sets_variable_in_parent_frame(self, interp):
        frame = interp.get_frame()
        result = await call(interp, "set", ["a", "b"])
        assert frame.get("a") == "b"
        assert result == "b"

    @pytest.mark.asyncio
    async def test_reads_variable_with_one_argument(self, interp):
        interp.get_frame().set("c", "hello")
        assert await call(interp, "set", ["c"]) == "hello"

    @pytest.mark.asyncio
    async def test_missing_variable(self, interp):
        with pytest.raises(UnknownVariableError):
            await call(interp, "set", ["nope"])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("words", [[], ["a", "b", "c"]])
    async def test_wrong_args(self, interp, words):
        with pytest.raises(WrongArgsError) as exc_info:
            await call(interp, "set", words)
        assert "set varName ?newValue?" in str(exc_info.value)


class TestGlobal:
    """Test the global command."""

    @pytest.mark.asyncio
    async def test_links_caller_frame_to_root(self, interp):
        interp.set_global("g", "1")
        with interp.state.frames.pushed() as caller:
            assert await call(interp, "global", ["g", "h"]) == ""
            assert caller.get("g") == "1"
            caller.set("h", "2")
        assert interp.get_global("h") == "2"

    @pytest.mark.asyncio
    async def test_no_effect_at_global_level(self, interp):
        interp.set_global("g", "1")
        await call(interp, "global", ["g"])
        assert interp.get_global("g") == "1"

    @pytest.mark.asyncio
    async def test_global_then_set_through_script(self, interp):
        await interp.evaluate("proc f {} {global counter; set counter 7}")
        await interp.evaluate("f")
        assert interp.get_global("counter") == "7"


class TestPuts:
    """Test the puts command."""

    @pytest.mark.asyncio
    async def test_writes_line(self, interp):
        assert await call(interp, "puts", ["hello"]) == ""
        assert interp.take_output() == "hello\n"

    @pytest.mark.asyncio
    async def test_nonewline(self, interp):
        await call(interp, "puts", ["-nonewline", "hello"])
        assert interp.take_output() == "hello"

    @pytest.mark.asyncio
    async def test_wrong_args(self, interp):
        with pytest.raises(WrongArgsError):
            await call(interp, "puts", ["a", "b"])

    @pytest.mark.asyncio
    async def test_writes_to_stream(self):
        import io

        stream = io.StringIO()
        interp = Interpreter(stdout=stream)
        await interp.evaluate("puts one; puts two")
        assert stream.getvalue() == "one\ntwo\n"
        assert interp.take_output() == ""


class TestProc:
    """Test the proc command."""

    @pytest.mark.asyncio
    async def test_registers_procedure(self, interp):
        assert await call(interp, "proc", ["double", "x", "set y $x$x"]) == ""
        handler = interp.commands["double"]
        assert isinstance(handler, Procedure)
        assert handler.params == ["x"]
        assert await interp.evaluate("double ab") == "abab"

    @pytest.mark.asyncio
    async def test_params_split_on_whitespace(self, interp):
        await call(interp, "proc", ["f", "  a\tb \n c ", "set c"])
        assert interp.commands["f"].params == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_wrong_args(self, interp):
        with pytest.raises(WrongArgsError):
            await call(interp, "proc", ["f", "a"])

    @pytest.mark.asyncio
    async def test_builtins_are_not_shared_between_interpreters(self, interp):
        other = Interpreter()
        await interp.evaluate("proc mine {} {set a 1}")
        assert interp.has_command("mine")
        assert not other.has_command("mine")
        assert "mine" not in BUILTINS


class TestReturnCommand:
    """Test the return command."""

    @pytest.mark.asyncio
    async def test_returns_first_argument(self, interp):
        assert await call(interp, "return", ["value"]) == "value"

    @pytest.mark.asyncio
    async def test_empty_without_arguments(self, interp):
        assert await call(interp, "return", []) == ""

    @pytest.mark.asyncio
    async def test_sets_return_flag(self, interp):
        await call(interp, "return", [])
        assert interp.return_flag is True

    @pytest.mark.asyncio
    async def test_dispatch_clears_return_flag(self, interp):
        completion = await interp.dispatch(["return", "v"])
        assert completion.returning
        assert completion.value == "v"
        assert interp.return_flag is False

    @pytest.mark.asyncio
    async def test_wrong_args(self, interp):
        with pytest.raises(WrongArgsError):
            await call(interp, "return", ["a", "b"])
