from __future__ import annotations

import pytest

from preempt.cli import main


@pytest.mark.usefixtures("session_scope")
def test_cli_builds_a_timeline(capsys) -> None:
    assert main(["add-context", "--name", "Work", "--days", "Mon,Tue", "--start", "09:00", "--end", "10:00"]) == 0
    assert main(["add-task", "--name", "Report", "--priority", "10", "--duration", "50", "--context", "work"]) == 0
    capsys.readouterr()

    assert main(["timeline", "--date", "2025-01-06"]) == 0

    assert capsys.readouterr().out.splitlines() == [
        "09:00:00 - 09:25:00 | Report",
        "09:25:00 - 09:30:00 | Break (5 minutes)",
        "09:30:00 - 09:55:00 | Report",
    ]


@pytest.mark.usefixtures("session_scope")
def test_cli_completed_tasks_drop_out_of_the_timeline(capsys) -> None:
    main(["add-context", "--name", "Work", "--days", "Mon", "--start", "09:00", "--end", "10:00"])
    main(["add-task", "--name", "Report", "--context", "Work"])
    assert main(["complete-task", "report"]) == 0
    capsys.readouterr()

    assert main(["timeline", "--date", "2025-01-06"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.usefixtures("session_scope")
def test_cli_show_context(capsys) -> None:
    main(
        ["add-context", "--name", "Gym", "--days", "Fri,Mon", "--start", "18:00", "--end", "19:00", "--transition", "90"]
    )
    capsys.readouterr()

    assert main(["show-context", "gym"]) == 0

    assert capsys.readouterr().out.splitlines() == [
        "Context - Gym",
        "- Days: Mon, Fri",
        "- Start Time: 18:00",
        "- End Time: 19:00",
        "- Transition Time: 1.50 hours",
        "- Exceptions: None",
    ]


@pytest.mark.usefixtures("session_scope")
def test_cli_reports_catalog_errors(capsys) -> None:
    assert main(["add-task", "--name", "Orphan", "--context", "Nowhere"]) == 1
    assert "Context doesn't exist: Nowhere" in capsys.readouterr().err

    assert main(["add-task", "--name", "Solo"]) == 0
    assert main(["add-task", "--name", "solo"]) == 1
    assert "Task already exists: solo" in capsys.readouterr().err

    assert main(["show-context", "Missing"]) == 1
    assert main(["add-context", "--name", "Bad", "--days", "Mon", "--start", "10:00", "--end", "09:00"]) == 1


def test_cli_rejects_unknown_day_codes() -> None:
    with pytest.raises(SystemExit):
        main(["add-context", "--name", "Bad", "--days", "Funday", "--start", "09:00", "--end", "10:00"])


@pytest.mark.parametrize(
    "argv",
    [
        ["add-task", "--name", "Negative", "--duration", "-30"],
        ["add-context", "--name", "Bad", "--days", "Mon", "--start", "09:00", "--end", "10:00", "--transition", "-15"],
    ],
)
def test_cli_rejects_negative_minutes(argv: list[str], capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code == 2
    assert "must not be negative" in capsys.readouterr().err
