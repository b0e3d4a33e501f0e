"""Tests for logtap.taplog — inline tap logging."""

import inspect

import pytest

import logtap.taplog as _tap_mod
from logtap.lib.log_lib import Console, InvalidChannelError, LocationUnresolvableError
from logtap.taplog import LogOptions, build_output, make_tap, resolve_options, tap


def _next_line():
    """Line number of the caller's next line."""
    return inspect.currentframe().f_back.f_lineno + 1


# ---------------------------------------------------------------------------
# Passthrough
# ---------------------------------------------------------------------------
class TestPassthrough:
    """tap() returns exactly what it was given."""

    @pytest.mark.parametrize("value", [0, '', False, None, 1.5, "text", (), []])
    def test_returns_value(self, value, capsys):
        assert tap(value) is value

    def test_returns_same_object(self, capsys):
        obj = {"a": [1, 2]}
        assert tap(obj, "obj") is obj
        assert obj == {"a": [1, 2]}

    def test_usable_inline(self, capsys):
        total = tap(3 * 4, {"label": "subtotal", "location": False}) + 1
        assert total == 13
        assert capsys.readouterr().out == "subtotal 12\n"


# ---------------------------------------------------------------------------
# Emitted output
# ---------------------------------------------------------------------------
class TestEmittedOutput:
    """What a tap call writes to the console."""

    def test_default_options_include_location(self, capsys):
        line = _next_line()
        tap(7)
        assert capsys.readouterr().out == f"7  - test_taplog.py:{line}\n"

    def test_default_matches_explicit_defaults(self, capsys):
        for opts in (None, {"label": "", "location": True}, LogOptions()):
            tap(7, opts)
        lines = capsys.readouterr().out.splitlines()
        assert len(set(lines)) == 1

    def test_label_shorthand_equivalence(self, capsys):
        for opts in ("mylabel", {"label": "mylabel"}, LogOptions(label="mylabel")):
            tap(5, opts)
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert len(set(lines)) == 1
        assert lines[0].startswith("mylabel 5  - test_taplog.py:")

    def test_location_suppressed(self, capsys):
        tap(5, {"location": False})
        assert capsys.readouterr().out == "5\n"

    def test_label_without_location_is_two_segments(self, capsys):
        tap(5, {"label": "x", "location": False})
        assert capsys.readouterr().out == "x 5\n"

    @pytest.mark.parametrize("value,expected", [
        (0, "0\n"),
        (False, "False\n"),
        ('', "\n"),
        (None, "None\n"),
    ])
    def test_falsy_value_still_logged(self, value, expected, capsys):
        tap(value, {"location": False})
        assert capsys.readouterr().out == expected

    def test_stacklevel_reports_helper_caller(self, capsys):
        def helper(v):
            return tap(v, stacklevel=2)

        line = _next_line()
        helper(1)
        assert capsys.readouterr().out == f"1  - test_taplog.py:{line}\n"

    def test_unresolvable_location_is_omitted(self, capsys, monkeypatch):
        def no_frame(*args, **kwargs):
            raise LocationUnresolvableError("no stack")

        monkeypatch.setattr(_tap_mod, "caller_frame", no_frame)
        assert tap(42, "answer") == 42
        assert capsys.readouterr().out == "answer 42\n"


# ---------------------------------------------------------------------------
# build_output / resolve_options
# ---------------------------------------------------------------------------
class TestBuildOutput:

    def test_value_only(self):
        assert build_output(0, LogOptions(location=False)) == [0]

    def test_label_value_location(self):
        assert build_output(1, LogOptions(label="l"), " - f.py:3") == ["l", 1, " - f.py:3"]

    def test_empty_label_dropped(self):
        assert build_output(None, LogOptions(label=""), " - f.py:3") == [None, " - f.py:3"]

    def test_location_flag_off_drops_location(self):
        assert build_output("v", LogOptions(location=False), " - f.py:3") == ["v"]


class TestResolveOptions:

    def test_none(self):
        assert resolve_options(None) == LogOptions(label="", location=True)

    def test_string(self):
        assert resolve_options("lbl") == LogOptions(label="lbl", location=True)

    def test_mapping_without_location(self):
        assert resolve_options({"label": "lbl"}) == LogOptions(label="lbl", location=True)

    def test_mapping_location_false(self):
        assert resolve_options({"location": False}) == LogOptions(label="", location=False)

    def test_log_options_passthrough(self):
        opts = LogOptions(label="a", location=False)
        assert resolve_options(opts) is opts

    def test_bad_type(self):
        with pytest.raises(TypeError):
            resolve_options(3)


# ---------------------------------------------------------------------------
# make_tap
# ---------------------------------------------------------------------------
class TestMakeTap:

    def test_bound_console_channel(self, recorder):
        warn_tap = make_tap("warn", recorder)
        assert warn_tap("v", {"label": "l", "location": False}) == "v"
        assert recorder.calls == [("warn", ("l", "v"))]

    def test_mapping_host(self):
        records = []
        host = {"log": lambda *args: records.append(args)}
        line = _next_line()
        make_tap("log", host)(5, "x")
        assert records == [("x", 5, f" - test_taplog.py:{line}")]

    def test_missing_channel(self):
        with pytest.raises(InvalidChannelError) as exc_info:
            make_tap("nope", Console())(1)
        assert exc_info.value.channel == "nope"
        assert isinstance(exc_info.value, AttributeError)

    def test_non_callable_channel(self):
        with pytest.raises(InvalidChannelError):
            make_tap("log", {"log": "not callable"})(1)

    def test_unbound_tap_follows_process_console(self, buf):
        from logtap.lib.log_lib import init_console

        init_console(stdout=buf)
        tap("routed", {"location": False})
        assert buf.getvalue() == "routed\n"

    def test_channel_attribute(self):
        assert make_tap("error").channel == "error"
        assert tap.channel == "log"


class TestModuleImports:
    """The tap and augmentation modules stay importable by path."""

    def test_taplog_module(self):
        import logtap.taplog as module

        assert inspect.ismodule(module)
        assert module.tap is tap

    def test_augmentation_module(self):
        import logtap
        import logtap.augmentation as module

        assert inspect.ismodule(module)
        assert module.install is logtap.install
