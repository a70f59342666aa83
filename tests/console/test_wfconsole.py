"""Tests for console/wfconsole.py: WFConsole modes and progress tasks."""

import pytest

from console import ConsoleConfig, ConsoleMode, ContentItem, WFConsole


def configure(**kwargs):
    return WFConsole(ConsoleConfig(show_time=False, **kwargs))


class TestSingleton:

    def test_same_instance(self):
        assert WFConsole() is WFConsole()

    def test_reconfigure_with_new_config(self):
        console = configure(mode=ConsoleMode.SILENT)
        assert console.get_console_config().mode == ConsoleMode.SILENT
        assert WFConsole() is console


class TestModes:

    def test_null_prints_nothing(self, capsys):
        console = configure(mode=ConsoleMode.NULL)
        console.print("hello")
        console.print_error("bad")
        assert capsys.readouterr().out == ""

    def test_normal_prints(self, capsys):
        console = configure(mode=ConsoleMode.NORMAL, use_colors=False)
        console.print("hello world")
        assert "hello world" in capsys.readouterr().out

    def test_silent_suppresses_text_but_not_errors(self, capsys):
        console = configure(mode=ConsoleMode.SILENT, use_colors=False)
        console.print("quiet please")
        console.print_warning("still quiet")
        console.print_error("went wrong")
        out = capsys.readouterr().out
        assert "quiet please" not in out
        assert "still quiet" not in out
        assert "went wrong" in out

    def test_logging_writes_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        console = configure(mode=ConsoleMode.LOGGING, log_file=str(log_file))
        console.print_notification("logged line")
        console._initialize(ConsoleConfig(mode=ConsoleMode.NULL))
        assert "logged line" in log_file.read_text(encoding="utf-8")

    def test_logging_without_file_raises(self):
        with pytest.raises(ValueError, match="log_file must be specified"):
            configure(mode=ConsoleMode.LOGGING)

    def test_logging_unopenable_file_raises(self, tmp_path):
        with pytest.raises(RuntimeError, match="Failed to open log file"):
            configure(mode=ConsoleMode.LOGGING, log_file=str(tmp_path / "missing" / "run.log"))


class TestProgressTasks:

    def test_disabled_in_null_mode(self):
        console = configure(mode=ConsoleMode.NULL)
        console.create_progress_task("t", "Task", total=10)
        assert not console.has_progress_task("t")
        assert console.update_progress_task("t", advance=1) is False
        assert console.remove_progress_task("t") is False

    def test_lifecycle_in_silent_mode(self):
        console = configure(mode=ConsoleMode.SILENT, use_colors=False)
        console.create_progress_task("t", "Task", total=4)
        assert console.has_progress_task("t")
        assert console.update_progress_task("t", advance=2)
        assert console._progress_tasks["t"]["completed"] == 2
        assert console.remove_progress_task("t")
        assert not console.has_progress_task("t")
        assert console._progress_bar is None

    def test_update_unknown_task(self):
        console = configure(mode=ConsoleMode.SILENT, use_colors=False)
        assert console.update_progress_task("missing", advance=1) is False


class TestContentItem:

    def test_renderable_types(self):
        assert ContentItem(type="table", content="x").is_renderable
        assert not ContentItem(type="text", content="x").is_renderable

    def test_icon_prefix(self):
        configure(mode=ConsoleMode.NULL)
        text = str(ContentItem(type="warning", content="careful"))
        assert "⚠" in text
        assert "careful" in text
