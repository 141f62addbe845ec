import pytest

from s3de.parser import ParseError, extract_match, find_couple, find_triple

CASES = [
    ("0,0", "1,2,3", (0, 0), (1, 2, 3)),
    ("0    ,    0", "   1,   100, 33.3 ", (0, 0), (1, 100, 33.3)),
    ("0 ,  000000", "   1.00000,   100, 33.3 ", (0, 0), (1, 100, 33.3)),
    ("00000,0", "   1000000.0001,   100, 33.3 ", (0, 0), (1000000.0001, 100, 33.3)),
    ("100,    0", "   1,   100, 33.3 ", (100, 0), (1, 100, 33.3)),
    ("100,    50", "   1,   100, 33.3 ", (100, 50), (1, 100, 33.3)),
    ("0    ,    40", "   1,   100, 33.3 ", (0, 40), (1, 100, 33.3)),
]


@pytest.mark.parametrize("couple_text, triple_text, couple, triple", CASES)
def test_simple(couple_text, triple_text, couple, triple):
    assert find_triple(triple_text) == pytest.approx(triple, rel=1e-6)
    assert find_couple(couple_text) == couple


def test_extract_match_returns_end_index_and_inner_text():
    text = "position (1,2,3) rest"
    end, inner = extract_match(text)
    assert inner == "1,2,3"
    assert text[end] == ")"


def test_extract_match_custom_delimiters():
    end, inner = extract_match("a[xy]b", "[", "]")
    assert (end, inner) == (4, "xy")


@pytest.mark.parametrize("text", ["no brackets", "(open only", "close only)", ")(reversed"])
def test_extract_match_errors(text):
    with pytest.raises(ParseError, match="are not match"):
        extract_match(text)


@pytest.mark.parametrize(
    "text, message",
    [
        ("1", "first parameter"),
        (",1,2", "first parameter"),
        ("1,2", "second parameter"),
        ("1,,2", "second parameter"),
        ("1,2,", "third parameter"),
    ],
)
def test_find_triple_errors(text, message):
    with pytest.raises(ParseError, match=message):
        find_triple(text)


def test_find_triple_rejects_non_numbers():
    with pytest.raises(ParseError):
        find_triple("a,b,c")


def test_find_triple_custom_separator():
    assert find_triple("1;2;3", ";") == pytest.approx((1, 2, 3))


def test_find_triple_ignores_trailing_garbage():
    assert find_triple("1x,2y,3z") == pytest.approx((1, 2, 3))


def test_find_triple_negative_and_exponent():
    assert find_triple("-1.5,2e2,.5") == pytest.approx((-1.5, 200.0, 0.5))


@pytest.mark.parametrize(
    "text, message",
    [("5", "first parameter"), (",5", "first parameter"), ("5,", "second parameter")],
)
def test_find_couple_errors(text, message):
    with pytest.raises(ParseError, match=message):
        find_couple(text)


def test_find_couple_rejects_non_numbers():
    with pytest.raises(ParseError):
        find_couple("a,b")