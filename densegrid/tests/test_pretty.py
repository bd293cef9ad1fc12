import pytest

from densegrid.src.core.grid import Grid
from densegrid.src.core.vec2 import Vec2
from densegrid.src.render.pretty import PrettyGrid
from densegrid.src.utils import config_loader

RED = "\033[1;31m"
GREEN = "\033[1;32m"
GRAY = "\033[38;2;192;192;192m"
RESET = "\033[0m"


@pytest.fixture(autouse=True)
def default_colors(monkeypatch):
    monkeypatch.setattr(config_loader, "COLOR_ENABLED", True)
    monkeypatch.setattr(config_loader, "RED_COLOR", "red")
    monkeypatch.setattr(config_loader, "GREEN_COLOR", "green")
    monkeypatch.setattr(config_loader, "NEUTRAL_RGB", (192, 192, 192))


def test_plain_rendering():
    g = Grid.from_nested([[1, 2], [3, 4]])
    assert str(g) == "1 2\n3 4\n"


def test_plain_rendering_reparses_to_equal_grid():
    g = Grid.from_str_chars("#.#\n.#.\n")
    text = str(g).replace(" ", "")
    assert Grid.from_str_chars(text) == g


def test_pretty_without_classifiers_is_all_gray():
    g = Grid.from_str_chars("ab\ncd")
    out = g.pretty().render()
    assert out == (
        f"{GRAY}a{RESET}{GRAY}b{RESET}\n"
        f"{GRAY}c{RESET}{GRAY}d{RESET}\n"
    )
    assert str(g.pretty()) == out


def test_red_marks_only_classified_cell():
    g = Grid.from_str_chars("ab\ncd")
    out = g.pretty().with_red(lambda p: p == (0, 0)).render()
    assert out.startswith(f"{RED}a{RESET}")
    assert out.count(RED) == 1
    assert GREEN not in out
    assert out.count(GRAY) == 3


def test_red_beats_green():
    g = Grid.from_str_chars("ab")
    out = g.pretty().with_green(lambda p: True).with_red(lambda p: p.x == 1).render()
    assert out == f"{GREEN}a{RESET}{RED}b{RESET}\n"


def test_classifier_receives_column_row():
    g = Grid.filled(3, 2, 0)
    seen = []
    g.pretty().with_red(lambda p: seen.append(p) or False).render()
    assert seen == list(g.positions())
    assert all(isinstance(p, Vec2) for p in seen)


def test_padding_right_aligns_wide_cells():
    g = Grid.from_nested([[1, 10], [100, 7]])
    out = g.pretty().render()
    lines = out.split("\n")
    assert lines[0] == f"   {GRAY}1{RESET}  {GRAY}10{RESET}"
    assert lines[1] == f" {GRAY}100{RESET}   {GRAY}7{RESET}"
    assert lines[2] == ""


def test_color_disabled_renders_bare_text(monkeypatch):
    monkeypatch.setattr(config_loader, "COLOR_ENABLED", False)
    g = Grid.from_nested([[1, 22]])
    assert g.pretty().with_red(lambda p: True).render() == "  1 22\n"


def test_configured_highlight_colors(monkeypatch):
    monkeypatch.setattr(config_loader, "RED_COLOR", "magenta")
    monkeypatch.setattr(config_loader, "NEUTRAL_RGB", "gray")
    out = Grid.from_str_chars("xy").pretty().with_red(lambda p: p.x == 0).render()
    assert out == f"\033[1;35mx{RESET}\033[90my{RESET}\n"


def test_builder_returns_same_renderer():
    g = Grid.filled(1, 1, "x")
    pretty = g.pretty()
    assert isinstance(pretty, PrettyGrid)
    assert pretty.with_red(bool) is pretty
    assert pretty.with_green(bool) is pretty
