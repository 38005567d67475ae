import io

from ring_road.io.console import StepReporter
from ring_road.model.road import Road


def test_report_first_step_uses_current_as_previous():
    road = Road(20)
    road.add_vehicle(0, 1)
    road.add_vehicle(5, 2)
    buf = io.StringIO()
    reporter = StepReporter(10, buf)

    road.update()
    reporter.report(0, road)

    assert buf.getvalue().splitlines() == [
        "Step  1 of 10: ..V.....V...........",
        "vehicle0(2) from vehicle0(2)",
        "vehicle1(8) from vehicle1(8)",
    ]


def test_report_tracks_previous_positions():
    road = Road(20)
    road.add_vehicle(0, 1)
    road.add_vehicle(5, 2)
    buf = io.StringIO()
    reporter = StepReporter(2, buf)

    road.update()
    reporter.report(0, road)
    road.update()
    reporter.report(1, road)

    lines = buf.getvalue().splitlines()
    assert lines[3].startswith("Step 2 of 2: ")
    assert lines[4] == "vehicle0(5) from vehicle0(2)"
    assert lines[5] == "vehicle1(12) from vehicle1(8)"


def test_header_and_reset():
    buf = io.StringIO()
    reporter = StepReporter(3, buf)
    reporter.previous_positions[0] = 4
    reporter.reset()
    reporter.header()
    assert reporter.previous_positions == {}
    assert buf.getvalue() == "Number of steps: 3\n"
