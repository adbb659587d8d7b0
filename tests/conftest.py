import dataclasses
import io
from contextlib import redirect_stderr, redirect_stdout
from datetime import datetime

import pytest

from everyday import cli, session
from everyday.config import Config
from everyday.lib import ansi, clock
from everyday.palette import cycle_picker
from everyday.session import Session

FIXED_NOW = datetime(2025, 5, 8, 9, 30)


@dataclasses.dataclass
class Result:
    exit_code: int
    stdout: str
    stderr: str


class FnCLIRunner:
    def __init__(self):
        cli.register()

    def invoke(self, args: list[str]) -> Result:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            try:
                code = cli.execute(args)
            except SystemExit as e:
                code = e.code if isinstance(e.code, int) else 1
        return Result(exit_code=code, stdout=out.getvalue(), stderr=err.getvalue())


@pytest.fixture(autouse=True)
def fixed_clock(monkeypatch):
    monkeypatch.setattr(clock, "now", lambda: FIXED_NOW)
    return FIXED_NOW


@pytest.fixture(autouse=True)
def tmp_everyday_dir(tmp_path, monkeypatch, fixed_clock):
    monkeypatch.setenv("EVERYDAY_DIR", str(tmp_path))
    Config.reset()
    ansi.use(ansi.PLAIN)
    session.reset(Session(pick_color=cycle_picker()))
    yield tmp_path
    Config.reset()
    ansi.use(ansi.DEFAULT)


@pytest.fixture
def runner():
    return FnCLIRunner()
