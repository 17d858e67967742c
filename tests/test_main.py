import io

import pytest

import main
from config import PAUSE_PROMPT


def test_application_runs_all_lessons_without_pause():
    out = io.StringIO()
    app = main.Application(seed=123, trials=3, pause=False, out=out)

    assert app.run() == 0
    assert [r.name for r in app.reports] == ["scalar-triple", "projection"]
    text = out.getvalue()
    assert "Seed: 123" in text
    assert PAUSE_PROMPT not in text


def test_application_waits_for_enter(monkeypatch):
    out = io.StringIO()
    calls = []
    monkeypatch.setattr("builtins.input", lambda: calls.append(True) or "")
    app = main.Application(seed=1, trials=1, lessons=["projection"], out=out)

    assert app.run() == 0
    assert calls == [True]
    assert out.getvalue().rstrip().endswith(PAUSE_PROMPT.rstrip())


def test_application_survives_closed_stdin(monkeypatch):
    def closed():
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    app = main.Application(seed=1, trials=1, lessons=["projection"], out=io.StringIO())
    assert app.run() == 0


def test_unknown_lesson_is_rejected():
    with pytest.raises(ValueError):
        main.Application(lessons=["matrices"])


def test_main_returns_zero(capsys):
    assert main.main(["--seed", "5", "--trials", "2", "--no-pause", "--lesson", "scalar-triple"]) == 0
    captured = capsys.readouterr()
    assert "Scalar Triple Product" in captured.out
    assert "scalar-triple: " in captured.out


def test_parse_args_rejects_bad_trials():
    with pytest.raises(SystemExit):
        main.parse_args(["--trials", "0"])


def test_help_documents_exit_status(capsys):
    with pytest.raises(SystemExit):
        main.parse_args(["--help"])
    help_text = " ".join(capsys.readouterr().out.split())
    assert main.EXIT_STATUS_HELP in help_text


def test_failed_check_gives_exit_status_one(monkeypatch):
    from lessons.lesson import Lesson

    original = Lesson.run

    def failing_run(self):
        report = original(self)
        self.check("forced failure", False)
        return report

    monkeypatch.setattr(Lesson, "run", failing_run)
    out = io.StringIO()
    app = main.Application(seed=1, trials=1, lessons=["projection"], pause=False, out=out)
    assert app.run() == 1
    assert "FAILED: forced failure" in out.getvalue()
