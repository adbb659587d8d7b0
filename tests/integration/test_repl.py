from everyday import cli, session


def _feed(lines: list[str]):
    it = iter(lines)

    def _read(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return _read


def test_repl_keeps_state_across_lines(runner, capsys):
    cli.repl(_feed(["add meditate", "toggle meditate", "stats", "quit", "add never"]))
    out = capsys.readouterr().out
    habits = session.current().list_habits()
    assert [h.name for h in habits] == ["meditate"]
    assert "✓ meditate" in out


def test_repl_survives_errors(runner, capsys):
    cli.repl(_feed(["toggle ghost", 'add "unterminated', "add run"]))
    captured = capsys.readouterr()
    assert "no habit found" in captured.err
    assert "cannot parse input" in captured.err
    assert [h.name for h in session.current().list_habits()] == ["run"]


def test_repl_help(runner, capsys):
    cli.repl(_feed(["help"]))
    assert "toggle REF" in capsys.readouterr().out


def test_repl_survives_day_out_of_range(runner, capsys):
    cli.repl(_feed(["add meditate", "toggle meditate -d -1000000", "toggle meditate"]))
    captured = capsys.readouterr()
    assert captured.err
    habit = session.current().list_habits()[0]
    assert len(habit.completions) == 1
