from kolam_canvas.recorder import PointerDown, PointerLeave, PointerMove, PointerUp, Recording, record


def feed(events, rec=None):
    rec = rec or Recording()
    emitted = []
    for event in events:
        rec, completed = record(rec, event)
        if completed is not None:
            emitted.append(completed)
    return rec, emitted


def test_stroke_with_two_points_is_committed():
    rec, emitted = feed([PointerDown(1, 2), PointerMove(3, 4), PointerUp()])
    assert rec.idle
    assert rec.committed == (((1, 2), (3, 4)),)
    assert emitted == [rec.committed]


def test_tap_is_discarded():
    rec, emitted = feed([PointerDown(1, 2), PointerUp()])
    assert rec.idle
    assert rec.committed == ()
    assert emitted == []


def test_leave_closes_stroke():
    rec, emitted = feed([PointerDown(0, 0), PointerMove(5, 5), PointerMove(9, 1), PointerLeave()])
    assert rec.committed == (((0, 0), (5, 5), (9, 1)),)
    assert len(emitted) == 1


def test_idle_ignores_move_and_up():
    start = Recording(committed=(((0, 0), (1, 1)),))
    rec, emitted = feed([PointerMove(3, 3), PointerUp(), PointerLeave()], start)
    assert rec == start
    assert emitted == []


def test_event_carries_all_paths():
    rec, emitted = feed([
        PointerDown(0, 0), PointerMove(1, 0), PointerUp(),
        PointerDown(5, 5), PointerMove(6, 6), PointerMove(7, 7), PointerUp(),
    ])
    assert len(emitted) == 2
    assert emitted[1] == (((0, 0), (1, 0)), ((5, 5), (6, 6), (7, 7)))


def test_second_press_restarts_stroke():
    rec, _ = feed([PointerDown(0, 0), PointerMove(1, 1), PointerDown(9, 9)])
    assert rec.current == ((9, 9),)
    assert rec.committed == ()


def test_committed_paths_are_not_mutated_by_later_strokes():
    rec, emitted = feed([PointerDown(0, 0), PointerMove(1, 1), PointerUp()])
    first = rec.committed[0]
    rec, _ = feed([PointerDown(2, 2), PointerMove(3, 3), PointerUp()], rec)
    assert rec.committed[0] is first
    assert first == ((0, 0), (1, 1))
