import logging

from rasterpaint.model.geometry import ClockFace, Point, Tool
from rasterpaint.model.rasterizer import rasterize_circle, rasterize_line
from rasterpaint.model.shapes import clock_points

from conftest import T0


def drag(controller, start, *moves):
    controller.on_pointer_down(*start)
    for point in moves:
        controller.on_pointer_move(*point)


# ---- line preview ----

def test_line_preview_is_replaced_on_every_move(controller, session):
    buf = session.buffer
    drag(controller, (10, 10), (20, 10))
    assert buf.opaque_points() == {(x, 10) for x in range(10, 20)}

    controller.on_pointer_move(20, 20)
    assert buf.opaque_points() == {(10 + i, 10 + i) for i in range(10)}


def test_move_without_press_is_ignored(controller, session):
    controller.on_pointer_move(30, 30)
    assert session.buffer.opaque_count() == 0
    assert session.stroke.state.end is None


def test_release_commits_last_preview(controller, session):
    drag(controller, (10, 50), (90, 50))
    controller.on_pointer_up()
    committed = session.buffer.opaque_points()
    assert committed == {(x, 50) for x in range(10, 90)}

    # a crossing preview must never punch holes into committed ink
    drag(controller, (50, 10), (50, 90), (51, 90), (49, 90), (50, 90))
    controller.on_tool_select("rect")

    assert session.buffer.opaque_points() == committed
    assert session.stroke.state.end is None


def test_repeated_strokes_accumulate(controller, session):
    drag(controller, (0, 0), (10, 0))
    controller.on_pointer_up()
    drag(controller, (0, 5), (10, 5))
    controller.on_pointer_up()

    expected = set(rasterize_line(0, 0, 10, 0)) | set(rasterize_line(0, 5, 10, 5))
    assert session.buffer.opaque_points() == expected


def test_rect_and_circle_previews(controller, session):
    controller.on_tool_select("rect")
    drag(controller, (10, 10), (30, 30), (40, 20))
    rect = session.buffer.opaque_points()
    assert (39, 20) in rect and (10, 19) in rect
    assert (30, 29) not in rect

    controller.on_pointer_up()
    controller.on_tool_select("circle")
    drag(controller, (60, 60), (70, 60))
    assert session.buffer.opaque_points() == rect | set(rasterize_circle(60, 60, 10))


def test_press_during_drag_drops_preview(controller, session):
    frames = []
    session.add_sink(lambda buf: frames.append(buf.opaque_points()))
    drag(controller, (10, 10), (40, 10))

    controller.on_pointer_down(60, 60)

    assert session.buffer.opaque_count() == 0
    assert frames[-1] == set()
    assert session.stroke.state.start == (60, 60)

    controller.on_pointer_move(70, 60)
    assert session.buffer.opaque_points() == {(x, 60) for x in range(60, 70)}


# ---- tool switching ----

def test_unknown_tool_is_ignored(controller, session, caplog):
    with caplog.at_level(logging.WARNING, logger="rasterpaint"):
        controller.on_tool_select("spray")
    assert controller.tool is Tool.LINE
    assert "spray" in caplog.text


def test_switch_mid_drag_cancels_preview(controller, session):
    drag(controller, (10, 10), (40, 40))
    controller.on_tool_select("circle")
    assert session.buffer.opaque_count() == 0

    controller.on_pointer_move(20, 10)
    assert session.buffer.opaque_points() == set(rasterize_circle(10, 10, 10))


def test_erase_clears_canvas_and_keeps_tool(controller, session):
    controller.on_tool_select("rect")
    drag(controller, (10, 10), (40, 40))
    controller.on_pointer_up()
    assert session.buffer.opaque_count() > 0

    controller.on_tool_select("erase")

    assert session.buffer.opaque_count() == 0
    assert not session.buffer.baseline.any()
    assert controller.tool is Tool.RECT


def test_erase_notifies_round_trip(controller, session):
    tools = []
    session.stroke.subscribe(lambda prev, cur: tools.append(cur.tool))
    controller.on_tool_select(Tool.ERASE)
    assert tools == [Tool.ERASE, Tool.LINE]


def test_frames_are_pushed(controller, session):
    frames = []
    session.add_sink(frames.append)
    drag(controller, (1, 1), (5, 5), (6, 6))
    controller.on_pointer_up()
    assert len(frames) == 4
    assert all(frame is session.buffer for frame in frames)


# ---- clock ----

def test_clock_preview_ticks_and_is_never_committed(controller, session, ticker):
    buf = session.buffer
    controller.on_tool_select("clock")
    drag(controller, (50, 50), (80, 50))

    face = ClockFace(Point(50, 50), Point(80, 50), T0)
    assert session.clock.state == face
    assert buf.opaque_points() == set(clock_points(face))

    ticker.advance(1000)
    assert buf.opaque_points() == set(clock_points(face.at(T0 + 1000)))

    controller.on_pointer_up()
    assert buf.opaque_count() == 0
    assert not buf.baseline.any()

    # the last frame comes back on the next tick
    ticker.advance(1000)
    assert buf.opaque_points() == set(clock_points(face.at(T0 + 2000)))

    controller.on_tool_select("line")
    assert buf.opaque_count() == 0
    assert session.clock.state is None


def test_clock_respects_committed_ink(controller, session, ticker):
    drag(controller, (0, 50), (100, 50))
    controller.on_pointer_up()
    committed = session.buffer.opaque_points()

    controller.on_tool_select("clock")
    drag(controller, (50, 50), (50, 20))
    ticker.advance(3000)
    controller.on_pointer_up()

    assert session.buffer.opaque_points() == committed


def test_ticks_ignored_for_other_tools(controller, session, ticker):
    frames = []
    session.add_sink(frames.append)
    ticker.advance(5000)
    assert frames == []


def test_new_clock_drag_replaces_ticking_clock(controller, session, ticker):
    controller.on_tool_select("clock")
    drag(controller, (30, 30), (40, 30))
    controller.on_pointer_up()
    ticker.advance(1000)

    drag(controller, (70, 70), (90, 70))
    face = ClockFace(Point(70, 70), Point(90, 70), ticker.time())
    assert session.buffer.opaque_points() == set(clock_points(face))


def test_stop_detaches(controller, session, ticker):
    controller.stop()
    assert not ticker.active
    session.stroke.press(Point(1, 1))
    session.stroke.drag_to(Point(9, 1))
    assert session.buffer.opaque_count() == 0
