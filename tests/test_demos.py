# tests/test_demos.py

import logging
import sys

import pytest
from PyQt5.QtCore import Qt

import gfxhelper.__main__ as app_main
import gfxhelper.bug_report as bug_report
from gfxhelper.demos import circles_example, draw_snowflake, snowflake_example
from gfxhelper.shapes import FilledCircle, Line, Text
from gfxhelper.utils import color_to_hex, path_from_points, to_color, to_vec
from gfxhelper.vector import Vec2


@pytest.mark.parametrize("depth, lines", [(0, 0), (1, 6), (2, 42), (3, 258)])
def test_snowflake_line_count(gfx, depth, lines):
    draw_snowflake(gfx, depth, gfx.center(), 200)
    queue = gfx.canvas.get_queue()
    assert len(queue) == lines
    assert all(isinstance(d, Line) for d in queue)


def test_snowflake_first_arm(gfx):
    draw_snowflake(gfx, 1, Vec2(100, 100), 50)
    first = gfx.canvas.get_queue()[0]
    assert first.p1 == Vec2(100, 100)
    assert tuple(first.p2) == pytest.approx((150, 100))
    assert first.stroke.cap == Qt.SquareCap
    assert first.stroke.join == Qt.MiterJoin
    assert color_to_hex(first.color) == "#0000FF"


def test_snowflake_example_keeps_last_frame(gfx):
    snowflake_example(gfx, frames=3, pause=0)
    queue = gfx.canvas.get_queue()
    assert [type(d) for d in queue[:2]] == [Text, Text]
    assert len(queue) == 2 + 42


def test_circles_example(gfx):
    circles_example(gfx, pause=0)
    queue = gfx.canvas.get_queue()
    assert len(queue) == 20
    assert isinstance(queue[0], FilledCircle)
    assert queue[0].r == 200
    assert queue[0].center == Vec2(260, 260)


def test_to_vec_and_to_color():
    assert to_vec((1, 2)) == Vec2(1.0, 2.0)
    v = Vec2(3, 4)
    assert to_vec(v) is v
    assert color_to_hex(to_color((10, 20, 30))) == "#0A141E"
    with pytest.raises(ValueError):
        to_color("nope")


def test_path_from_points():
    path = path_from_points([(0, 0), (10, 0), (10, 10)])
    rect = path.boundingRect()
    assert (rect.width(), rect.height()) == (10, 10)
    assert path_from_points([]).isEmpty()


def test_main_parses_demo_choice():
    assert app_main.parse_args([]).demo == "snowflake"
    assert app_main.parse_args(["--demo", "circles"]).demo == "circles"
    with pytest.raises(SystemExit):
        app_main.parse_args(["--demo", "teapot"])


@pytest.mark.parametrize("argv, chosen", [([], "snowflake"), (["--demo", "circles"], "circles")])
def test_main_runs_demo_and_returns_exit_code(gfx, monkeypatch, argv, chosen):
    ran = []
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setattr(app_main, "get_instance", lambda: gfx)
    monkeypatch.setattr(gfx.app, "exec_", lambda: 3)
    for name in app_main.DEMOS:
        monkeypatch.setitem(app_main.DEMOS, name, lambda helper, name=name: ran.append((name, helper)))

    gfx.draw_circle((1, 1), 1, "red")
    assert app_main.main(argv) == 3
    assert ran == [(chosen, gfx)]
    assert gfx.canvas.get_queue() == ()
    assert sys.excepthook is bug_report._excepthook
