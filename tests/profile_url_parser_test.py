import pytest

from domain.exceptions import ProfileURLParsingError
from domain.parsers.profile_url import ProfileURLParser


@pytest.mark.parametrize(
    "url, expected_handle",
    [
        ("https://leetcode.com/u/abc/", "abc"),
        ("https://leetcode.com/u/abc", "abc"),
        ("https://leetcode.com/u/some_user-42/", "some_user-42"),
    ],
)
def test_parse_valid_urls(url, expected_handle) -> None:
    assert ProfileURLParser.parse(url) == expected_handle


@pytest.mark.parametrize(
    "url",
    [
        "",
        "https://leetcode.com/abc/",
        "http://leetcode.com/u/abc/",
        "https://leetcode.cn/u/abc/",
        "https://codeforces.com/profile/abc",
        "https://leetcode.com/u/",
    ],
)
def test_parse_unrecognized_urls(url) -> None:
    with pytest.raises(ProfileURLParsingError):
        ProfileURLParser.parse(url)


def test_only_one_trailing_slash_is_stripped() -> None:
    assert ProfileURLParser.parse("https://leetcode.com/u/abc//") == "abc/"
