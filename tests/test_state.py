import pytest

from rasterpaint.model.errors import InvalidTool
from rasterpaint.model.geometry import ClockFace, Point, Tool
from rasterpaint.model.state import ClockStore, StrokeState, StrokeStore


@pytest.fixture
def events():
    return []


def test_tool_parse():
    assert Tool.parse("rect") is Tool.RECT
    assert Tool.parse(" Clock ") is Tool.CLOCK
    assert Tool.parse(Tool.LINE) is Tool.LINE
    with pytest.raises(InvalidTool):
        Tool.parse("spray")


def test_initial_stroke_state():
    state = StrokeStore().state
    assert state == StrokeState(tool=Tool.LINE, start=None, end=None, pointer_down=False)


def test_press_notifies_previous_and_current(events):
    store = StrokeStore()
    store.subscribe(lambda prev, cur: events.append((prev, cur)))

    store.press(Point(3, 4))

    assert len(events) == 1
    prev, cur = events[0]
    assert prev.start is None and not prev.pointer_down
    assert cur.start == (3, 4) and cur.end is None and cur.pointer_down


def test_press_clears_previous_end():
    store = StrokeStore()
    store.press(Point(0, 0))
    store.drag_to(Point(5, 5))
    store.release()
    store.press(Point(9, 9))
    assert store.state.end is None
    assert store.state.start == (9, 9)


def test_states_are_not_mutated_in_place(events):
    store = StrokeStore()
    store.subscribe(lambda prev, cur: events.append((prev, cur)))
    store.press(Point(1, 1))
    store.drag_to(Point(2, 2))

    assert events[0][1].end is None
    assert events[1][0] is events[0][1]
    assert events[1][1].end == (2, 2)


def test_unsubscribe(events):
    store = StrokeStore()
    unsubscribe = store.subscribe(lambda prev, cur: events.append(cur))
    store.select_tool(Tool.RECT)
    unsubscribe()
    unsubscribe()
    store.select_tool(Tool.CIRCLE)

    assert [s.tool for s in events] == [Tool.RECT]


def test_clock_store_tick_without_face_is_silent(events):
    store = ClockStore()
    store.subscribe(lambda prev, cur: events.append((prev, cur)))
    store.tick(1000)
    assert events == []


def test_clock_store_tick_retimes_face(events):
    store = ClockStore()
    face = ClockFace(Point(10, 10), Point(20, 10), 0)
    store.show(face)
    store.subscribe(lambda prev, cur: events.append((prev, cur)))

    store.tick(1000)
    store.hide()

    assert events == [(face, face.at(1000)), (face.at(1000), None)]
    assert store.state is None
