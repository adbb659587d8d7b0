from everyday.lib import ansi
from everyday.lib.ansi import DEFAULT, PLAIN, Theme, bold, color, dim, strip


def test_theme_defaults():
    assert DEFAULT.bold == "\033[1m"
    assert DEFAULT.reset == "\033[0m"


def test_plain_theme_has_no_codes():
    assert all(v == "" for v in vars(PLAIN).values())


def test_bold_and_dim():
    ansi.use(Theme())
    assert bold("hi") == "\033[1mhi\033[0m"
    assert "\033[2m" in dim("hi")


def test_color_by_palette_name():
    ansi.use(Theme())
    assert color("green", "■") == f"{DEFAULT.green}■{DEFAULT.reset}"
    assert color("nope", "■") == f"{DEFAULT.muted}■{DEFAULT.reset}"


def test_strip():
    ansi.use(Theme())
    assert strip(color("pink", "x") + bold("y")) == "xy"
