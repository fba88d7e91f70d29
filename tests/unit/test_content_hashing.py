from persistence.hashing import content_key, pattern_set_digest


PATTERNS = [r"^(?P<name>.+) ep(?P<episode>\d+)"]
FINISHED = [r"finished$"]


def test_content_key_is_deterministic_u64() -> None:
    key = content_key("Show X ep12", PATTERNS, FINISHED)
    assert key == content_key("Show X ep12", list(PATTERNS), list(FINISHED))
    assert 0 <= key < 2**64


def test_content_key_changes_with_line() -> None:
    assert content_key("Show X ep12", PATTERNS, FINISHED) != content_key(
        "Show X ep13", PATTERNS, FINISHED
    )


def test_content_key_changes_with_any_pattern_edit() -> None:
    base = content_key("Show X ep12", PATTERNS, FINISHED)
    assert base != content_key("Show X ep12", [PATTERNS[0] + "$"], FINISHED)
    assert base != content_key("Show X ep12", PATTERNS, ["finished"])
    assert base != content_key("Show X ep12", PATTERNS + ["extra"], FINISHED)
    assert base != content_key("Show X ep12", PATTERNS, [])


def test_content_key_distinguishes_list_membership() -> None:
    moved = content_key("line", ["a", "b"], [])
    assert moved != content_key("line", ["a"], ["b"])
    assert moved != content_key("line", ["ab"], [])


def test_content_key_field_boundaries_are_unambiguous() -> None:
    assert content_key("a\x00b", [], []) != content_key("a", ["b"], [])
    assert content_key("ab", ["c"], []) != content_key("a", ["bc"], [])


def test_pattern_set_digest_stable() -> None:
    assert pattern_set_digest(PATTERNS, FINISHED) == pattern_set_digest(PATTERNS, FINISHED)
    assert pattern_set_digest(PATTERNS, FINISHED) != pattern_set_digest(PATTERNS, [])
