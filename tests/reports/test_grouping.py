from datetime import date, datetime, timedelta, timezone

from shift_attendance.core.enums import EventKind
from shift_attendance.reports.grouping import group_by_day


def test_groups_by_utc_date_and_sorts(make_event):
    late = make_event(EventKind.EXIT, datetime(2025, 9, 2, 9, 0, tzinfo=timezone.utc))
    early = make_event(EventKind.ENTRANCE, datetime(2025, 9, 2, 6, 0, tzinfo=timezone.utc))
    other_day = make_event(EventKind.ENTRANCE, datetime(2025, 9, 1, 23, 59, 59, tzinfo=timezone.utc))

    buckets = group_by_day([late, other_day, early])

    assert list(buckets) == [date(2025, 9, 1), date(2025, 9, 2)]
    assert buckets[date(2025, 9, 1)] == [other_day]
    assert buckets[date(2025, 9, 2)] == [early, late]


def test_days_without_events_are_absent():
    assert group_by_day([]) == {}


def test_identical_instants_keep_input_order(make_event):
    instant = datetime(2025, 9, 1, 7, 0, tzinfo=timezone.utc)
    first = make_event(EventKind.EXIT, instant)
    second = make_event(EventKind.ENTRANCE, instant)

    assert group_by_day([first, second])[date(2025, 9, 1)] == [first, second]


def test_each_event_lands_in_exactly_one_bucket(make_event):
    events = [
        make_event(EventKind.ENTRANCE, datetime(2025, 9, d, h, tzinfo=timezone.utc))
        for d in (1, 2, 3)
        for h in (0, 12, 23)
    ]

    buckets = group_by_day(events)

    assert sum(len(v) for v in buckets.values()) == len(events)


def test_offset_instants_are_bucketed_by_utc_day(make_event):
    event = make_event(EventKind.ENTRANCE, datetime(2025, 9, 2, 2, 0, tzinfo=timezone(timedelta(hours=5))))

    assert event.instant == datetime(2025, 9, 1, 21, 0, tzinfo=timezone.utc)
    assert list(group_by_day([event])) == [date(2025, 9, 1)]
