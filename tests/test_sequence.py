from brace_expansion.core.expand.sequence import generate_sequence
from brace_expansion.core.model import AlphaRange, CommaList, LiteralBody, NumericRange
from brace_expansion.core.parse.classify import classify_body, is_padded


def test_classify_numeric():
    assert classify_body("1..10..2") == NumericRange(start=1, end=10, step=2, width=2, padded=False)
    assert classify_body("-3..03") == NumericRange(start=-3, end=3, step=1, width=2, padded=True)


def test_classify_alpha():
    assert classify_body("a..z") == AlphaRange(start=ord("a"), end=ord("z"), step=1)
    assert classify_body("A..e..-3") == AlphaRange(start=ord("A"), end=ord("e"), step=3)


def test_classify_comma_and_literal():
    assert classify_body("a,b") == CommaList(body="a,b")
    assert classify_body("a") == LiteralBody(body="a")
    assert classify_body("") == LiteralBody(body="")
    assert classify_body("1..2\n") == LiteralBody(body="1..2\n")
    assert classify_body("ab..c") == LiteralBody(body="ab..c")


def test_is_padded():
    assert is_padded("01")
    assert is_padded("-007")
    assert not is_padded("0")
    assert not is_padded("-0")
    assert not is_padded("10")


def test_ascending_and_descending():
    assert generate_sequence(classify_body("1..4")) == ["1", "2", "3", "4"]
    assert generate_sequence(classify_body("4..1")) == ["4", "3", "2", "1"]


def test_step_does_not_overshoot():
    assert generate_sequence(classify_body("1..6..4")) == ["1", "5"]
    assert generate_sequence(classify_body("0..-7..-3")) == ["0", "-3", "-6"]


def test_padding():
    assert generate_sequence(classify_body("001..3")) == ["001", "002", "003"]
    assert generate_sequence(classify_body("-05..-3")) == ["-05", "-04", "-03"]
    assert generate_sequence(classify_body("98..0100")) == ["0098", "0099", "0100"]


def test_alpha_members():
    assert generate_sequence(classify_body("x..z")) == ["x", "y", "z"]
    assert generate_sequence(classify_body("z..x")) == ["z", "y", "x"]
    assert generate_sequence(classify_body("Z..a")) == ["Z", "[", "", "]", "^", "_", "`", "a"]
