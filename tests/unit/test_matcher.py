from datetime import datetime, time

import pytest

from parsing.matcher import PatternCompileError, match_finished, match_line


def test_first_matching_pattern_wins() -> None:
    patterns = [
        r"^(?P<name>.+?) 第(?P<season>\S+?)季 第(?P<episode>\S+?)集",
        r"^(?P<name>.+?) 第(?P<episode>\S+?)集",
    ]
    entry = match_line("进击的巨人 第三季 第十二集", patterns, [])

    assert entry is not None
    assert entry.title == "进击的巨人"
    assert entry.season == 3
    assert entry.episode == 12
    assert entry.matched_pattern == patterns[0]


def test_pattern_without_name_group_is_skipped() -> None:
    patterns = [
        r"ep(?P<episode>\d+)",
        r"^(?P<name>.+) ep(?P<episode>\d+)",
    ]
    entry = match_line("Show X ep12", patterns, [])

    assert entry is not None
    assert entry.matched_pattern == patterns[1]
    assert entry.title == "Show X"


def test_unparticipating_name_group_is_skipped() -> None:
    patterns = [r"^(?:(?P<name>[A-Z]+)|\d+) ep", r"^(?P<name>\w+)"]
    entry = match_line("123 ep", patterns, [])

    assert entry is not None
    assert entry.title == "123"
    assert entry.matched_pattern == patterns[1]


def test_show_x_scenario() -> None:
    entry = match_line(
        "Show X ep12 finished",
        [r"^(?P<name>.+) ep(?P<episode>\d+)"],
        [r"finished$"],
    )

    assert entry is not None
    assert entry.title == "Show X"
    assert entry.episode == 12
    assert entry.finished is True
    assert entry.matched_finished_pattern == "finished$"


def test_end_anchored_pattern_does_not_match_trailing_word() -> None:
    entry = match_line(
        "Show X ep12 finished",
        [r"^(?P<name>.+) ep(?P<episode>\d+)$"],
        [r"finished$"],
    )
    assert entry is None


def test_all_fields_are_normalized() -> None:
    pattern = (
        r"^(?P<logged_time>\S+ \S+) (?P<name>.+?) S(?P<season>\S+) "
        r"E(?P<episode>\S+) @(?P<time_at_episode>\S+)(?: #(?P<note>.*))?$"
    )
    entry = match_line("2024-01-02 20:30 Dark S二 E05 @1:02:03 #rewatch", [pattern], [])

    assert entry is not None
    assert entry.logged_at == datetime(2024, 1, 2, 20, 30)
    assert entry.season == 2
    assert entry.episode == 5
    assert entry.elapsed_time == time(1, 2, 3)
    assert entry.note == "rewatch"
    assert entry.raw_line.startswith("2024-01-02")


def test_malformed_tokens_become_absent() -> None:
    pattern = r"^(?P<name>\w+) (?P<episode>\S+) (?P<time_at_episode>\S+) (?P<logged_time>.+)$"
    entry = match_line("Dark e? 1:2:3:4 yesterday", [pattern], [])

    assert entry is not None
    assert entry.title == "Dark"
    assert entry.episode is None
    assert entry.elapsed_time is None
    assert entry.logged_at is None


def test_finished_is_independent_of_extraction() -> None:
    finished = [r"完结", r"看完"]
    first = match_line("A 看完", [r"^(?P<name>\S+)"], finished)
    second = match_line("A 看完", [r"^(?P<name>A)"], finished)

    assert first is not None and second is not None
    assert first.finished and second.finished
    assert first.matched_finished_pattern == "看完"
    assert match_finished("A 完结 看完", finished) == "完结"
    assert match_finished("A", finished) is None


def test_no_match_returns_none_and_logs(caplog) -> None:
    with caplog.at_level("ERROR"):
        assert match_line("nothing here", [r"^ep(?P<name>\d+)"], []) is None
    assert "cannot match any regex patterns" in caplog.text


def test_invalid_pattern_is_fatal() -> None:
    with pytest.raises(PatternCompileError) as excinfo:
        match_line("line", [r"(?P<name>"], [])
    assert excinfo.value.pattern == r"(?P<name>"

    with pytest.raises(PatternCompileError):
        match_line("line", [r"(?P<name>.+)"], [r"[unclosed"])
