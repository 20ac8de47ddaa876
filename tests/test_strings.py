import pytest

from algokit.strings import is_palindrome, reverse_string, sort_by_length


@pytest.mark.parametrize(
    ("text", "expected"),
    [("abba", True), ("abc", False), ("abccad", False), ("", True), ("x", True)],
)
def test_is_palindrome(text, expected):
    assert is_palindrome(text) is expected


@pytest.mark.parametrize("text", ["", "a", "hello", "racecar", "ab cd"])
def test_reverse_round_trip(text):
    reversed_text = reverse_string(text)
    assert reverse_string(reversed_text) == text
    assert len(reversed_text) == len(text)
    assert (reversed_text == text) is is_palindrome(text)


def test_reverse_value():
    assert reverse_string("hello") == "olleh"


def test_sort_by_length_example():
    assert sort_by_length(["ab", "c", "abc", "bb"]) == ["abc", "ab", "bb", "c"]


def test_sort_by_length_invariants():
    lines = ["pear", "fig", "banana", "kiwi", "apple", "date", "a b c"]
    result = sort_by_length(lines)
    assert sorted(result) == sorted(lines)
    for first, second in zip(result, result[1:]):
        assert len(first) > len(second) or (
            len(first) == len(second) and first <= second
        )