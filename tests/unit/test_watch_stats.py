from schemas.records import WatchRecord
from services.watch_stats import WatchStats, format_summary


def _record(index: int, title: str, *, season=None, finished=False) -> WatchRecord:
    return WatchRecord(
        id=index,
        index=index,
        title=title,
        season=season,
        finished=finished,
        raw_line=title,
        matched_pattern="(?P<name>.+)",
    )


def test_groups_by_title_and_season_in_first_seen_order() -> None:
    stats = WatchStats(
        [
            _record(0, "Dark", season=1),
            _record(1, "Show X"),
            _record(2, "Dark", season=2),
            _record(3, "Dark", season=1, finished=True),
            _record(4, "Show X"),
        ]
    )

    summaries = stats.all()
    assert [(s.title, s.season) for s in summaries] == [
        ("Dark", 1),
        ("Show X", None),
        ("Dark", 2),
    ]
    assert [s.watched_times for s in summaries] == [2, 2, 1]
    assert [s.finished for s in summaries] == [True, False, False]
    assert [entry.index for entry in summaries[0].entries] == [0, 3]


def test_finished_is_sticky() -> None:
    stats = WatchStats(
        [
            _record(0, "Dark", finished=True),
            _record(1, "Dark"),
        ]
    )
    assert stats.all()[0].finished is True
    assert stats.unfinished() == []


def test_unfinished_filter() -> None:
    stats = WatchStats(
        [
            _record(0, "Dark", finished=True),
            _record(1, "Show X"),
            _record(2, "Show Y"),
        ]
    )
    assert [s.title for s in stats.unfinished()] == ["Show X", "Show Y"]


def test_query_is_case_insensitive_substring() -> None:
    stats = WatchStats(
        [
            _record(0, "Dark"),
            _record(1, "The Darkness", season=1),
            _record(2, "Show X"),
        ]
    )
    assert [s.title for s in stats.query("dark")] == ["Dark", "The Darkness"]
    assert stats.query("nothing") == []


def test_records_are_copied() -> None:
    stats = WatchStats([_record(0, "Dark")])
    stats.records.clear()
    assert len(stats.records) == 1


def test_format_summary() -> None:
    stats = WatchStats(
        [
            _record(0, "Dark", season=2, finished=True),
            _record(1, "Show X"),
        ]
    )
    dark, show = stats.all()
    assert format_summary(dark) == "Dark season 2 - finished"
    assert format_summary(show) == "Show X - unfinished"
    assert format_summary(show, with_state=False) == "Show X"
