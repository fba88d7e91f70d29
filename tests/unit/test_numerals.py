import pytest

from parsing.numerals import parse_cjk_number, parse_number


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("12", 12),
        ("007", 7),
        ("+3", 3),
        ("0", 0),
        ("65535", 65535),
    ],
)
def test_parse_number_decimal(token: str, expected: int) -> None:
    assert parse_number(token) == expected


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("三", 3),
        ("十", 10),
        ("十二", 12),
        ("二十", 20),
        ("二十三", 23),
        ("一百零五", 105),
        ("两百", 200),
        ("一千零一", 1001),
        ("一千零十", 1010),
        ("一千零十五", 1015),
        ("一百一十", 110),
        ("一万二千三百四十五", 12345),
        ("贰拾", 20),
        ("二〇二四", 2024),
        ("零", 0),
    ],
)
def test_parse_number_falls_back_to_cjk(token: str, expected: int) -> None:
    assert parse_number(token) == expected


@pytest.mark.parametrize(
    "token",
    [
        "", "-1", "1.5", "12a", "65536", "七万",
        "十百", "百十", "百", "三三十", "abc", " 12",
    ],
)
def test_parse_number_rejects_garbage(token: str) -> None:
    assert parse_number(token) is None


def test_parse_cjk_number_unbounded() -> None:
    assert parse_cjk_number("七万") == 70000
    assert parse_cjk_number("一万零五") == 10005
    assert parse_cjk_number("万") is None
    assert parse_cjk_number("一万一万") is None
