from datetime import date, datetime, timezone

import pytest

from shift_attendance.core.enums import EventKind, ShiftId
from shift_attendance.core.exceptions import ReconciliationError
from shift_attendance.reports.assembler import ReportAssembler
from shift_attendance.reports.model import Report, ReportDay
from shift_attendance.reports.payload import report_to_dict


def _at(d, h, m=0):
    return datetime(2025, 9, d, h, m, tzinfo=timezone.utc)


def _build(shift_id, events, start=date(2025, 9, 1), end=date(2025, 9, 1)):
    return ReportAssembler().build(
        employee_id="emp-1",
        start=start,
        end=end,
        shift_id=shift_id,
        events=events,
    )


def test_on_time_single_window_day(make_event):
    events = [make_event(EventKind.ENTRANCE, _at(1, 5, 58)), make_event(EventKind.EXIT, _at(1, 10))]

    report = _build(ShiftId.A, events)

    day = report.days[0]
    assert (day.minutes_late, day.minutes_idle) == (0, 0)
    assert day.events == tuple(events)


def test_late_arrival_day(make_event):
    report = _build(ShiftId.A, [make_event(EventKind.ENTRANCE, _at(1, 6, 15))])

    assert (report.days[0].minutes_late, report.days[0].minutes_idle) == (15, 0)
    assert report.total_minutes_late == 15


def test_idle_gap_day(make_event):
    events = [
        make_event(EventKind.ENTRANCE, _at(1, 6)),
        make_event(EventKind.EXIT, _at(1, 7)),
        make_event(EventKind.ENTRANCE, _at(1, 7, 30)),
    ]

    report = _build(ShiftId.A, events)

    assert (report.total_minutes_late, report.total_minutes_idle) == (0, 30)


def test_trailing_exit_day(make_event):
    events = [make_event(EventKind.ENTRANCE, _at(1, 6)), make_event(EventKind.EXIT, _at(1, 9, 50))]

    report = _build(ShiftId.A, events)

    assert (report.total_minutes_late, report.total_minutes_idle) == (0, 0)


def test_multi_day_range_with_gaps(make_event):
    events = [
        make_event(EventKind.ENTRANCE, _at(2, 6, 20)),
        make_event(EventKind.EXIT, _at(2, 8)),
        make_event(EventKind.ENTRANCE, _at(2, 8, 45)),
    ]

    report = _build(ShiftId.A, events, start=date(2025, 9, 1), end=date(2025, 9, 3))

    assert [d.day for d in report.days] == [date(2025, 9, 1), date(2025, 9, 2), date(2025, 9, 3)]
    first, second, third = report.days
    assert first.events == () and third.events == ()
    assert (first.minutes_late, first.minutes_idle) == (0, 0)
    assert (third.minutes_late, third.minutes_idle) == (0, 0)
    assert (second.minutes_late, second.minutes_idle) == (20, 45)
    assert (report.total_minutes_late, report.total_minutes_idle) == (20, 45)


def test_both_windows_of_a_day_are_summed(make_event):
    events = [
        make_event(EventKind.ENTRANCE, _at(1, 6, 10)),
        make_event(EventKind.EXIT, _at(1, 10)),
        make_event(EventKind.ENTRANCE, _at(1, 11, 5)),
        make_event(EventKind.EXIT, _at(1, 13)),
        make_event(EventKind.ENTRANCE, _at(1, 13, 15)),
    ]

    report = _build(ShiftId.A, events)

    assert (report.total_minutes_late, report.total_minutes_idle) == (15, 15)


def test_shift_b_evening_windows(make_event):
    events = [
        make_event(EventKind.ENTRANCE, _at(1, 15, 3)),
        make_event(EventKind.EXIT, _at(1, 19)),
        make_event(EventKind.ENTRANCE, _at(1, 20, 30)),
        make_event(EventKind.EXIT, _at(1, 22)),
        make_event(EventKind.ENTRANCE, _at(1, 22, 10)),
    ]

    report = _build(ShiftId.B, events)

    assert (report.total_minutes_late, report.total_minutes_idle) == (33, 10)


def test_unknown_shift_zeroes_every_day(make_event):
    events = [
        make_event(EventKind.ENTRANCE, _at(1, 9)),
        make_event(EventKind.EXIT, _at(1, 10)),
        make_event(EventKind.ENTRANCE, _at(1, 12)),
    ]

    report = _build(ShiftId.UNKNOWN, events, end=date(2025, 9, 2))

    assert all(d.minutes_late == 0 and d.minutes_idle == 0 for d in report.days)
    assert all(d.shift_id == ShiftId.UNKNOWN for d in report.days)
    assert report.days[0].events == tuple(events)


def test_unrecognised_shift_string_is_treated_as_unknown(make_event):
    report = _build("Z", [make_event(EventKind.ENTRANCE, _at(1, 9))])

    assert report.days[0].shift_id == ShiftId.UNKNOWN
    assert report.total_minutes_late == 0


def test_start_after_end_yields_empty_report():
    report = _build(ShiftId.A, [], start=date(2025, 9, 3), end=date(2025, 9, 1))

    assert report.days == ()
    assert (report.total_minutes_late, report.total_minutes_idle) == (0, 0)


@pytest.mark.parametrize("start,end,expected", [
    (date(2025, 9, 1), date(2025, 9, 1), 1),
    (date(2025, 9, 1), date(2025, 9, 30), 30),
    (date(2024, 2, 28), date(2024, 3, 1), 3),
    (date(2025, 12, 31), date(2026, 1, 1), 2),
])
def test_range_completeness(start, end, expected):
    assert len(_build(ShiftId.B, [], start=start, end=end).days) == expected


def test_totals_reconcile_with_days(make_event):
    events = [
        make_event(EventKind.ENTRANCE, _at(d, 6, d))
        for d in range(1, 8)
    ]

    report = _build(ShiftId.A, events, start=date(2025, 9, 1), end=date(2025, 9, 7))

    assert report.total_minutes_late == sum(d.minutes_late for d in report.days) == sum(range(1, 8))
    assert report.total_minutes_idle == sum(d.minutes_idle for d in report.days)


def test_report_rejects_totals_that_do_not_reconcile():
    day = ReportDay(day=date(2025, 9, 1), shift_id=ShiftId.A, minutes_late=5, minutes_idle=0)

    with pytest.raises(ReconciliationError):
        Report(
            employee_id="emp-1",
            start=date(2025, 9, 1),
            end=date(2025, 9, 1),
            total_minutes_late=4,
            total_minutes_idle=0,
            days=(day,),
        )


def test_same_input_gives_identical_output(make_event):
    events = [
        make_event(EventKind.EXIT, _at(1, 7)),
        make_event(EventKind.ENTRANCE, _at(1, 6, 5)),
        make_event(EventKind.ENTRANCE, _at(1, 7, 20)),
    ]
    assembler = ReportAssembler()

    first = assembler.build(employee_id="emp-1", start=date(2025, 9, 1), end=date(2025, 9, 2), shift_id=ShiftId.A, events=events)
    second = assembler.build(employee_id="emp-1", start=date(2025, 9, 1), end=date(2025, 9, 2), shift_id=ShiftId.A, events=events)

    assert first == second
    assert report_to_dict(first) == report_to_dict(second)


def test_events_are_listed_in_chronological_order(make_event):
    later = make_event(EventKind.EXIT, _at(1, 9))
    earlier = make_event(EventKind.ENTRANCE, _at(1, 6))

    report = _build(ShiftId.A, [later, earlier])

    assert report.days[0].events == (earlier, later)


def test_naive_instants_are_read_as_utc(make_event):
    report = _build(ShiftId.A, [make_event(EventKind.ENTRANCE, datetime(2025, 9, 1, 6, 15))])

    assert report.days[0].events[0].instant.tzinfo is not None
    assert (report.days[0].minutes_late, report.days[0].minutes_idle) == (15, 0)
