from brace_expansion.core.model import Group
from brace_expansion.core.parse.balanced import find_pair, locate


def test_locate_first_top_level_group():
    assert locate("pre{in}post") == Group(pre="pre", body="in", post="post")


def test_locate_respects_nesting():
    assert locate("a{b{c,d}e}f{g}") == Group(pre="a", body="b{c,d}e", post="f{g}")


def test_locate_empty_body():
    assert locate("a{}b") == Group(pre="a", body="", post="b")


def test_locate_without_braces():
    assert locate("") is None
    assert locate("plain") is None


def test_locate_unclosed_or_reversed():
    assert locate("{abc") is None
    assert locate("abc}") is None
    assert locate("}{") is None


def test_unclosed_opener_falls_back_to_inner_pair():
    assert find_pair("{a{b,c}") == (2, 6)
    assert locate("{a{b,c}") == Group(pre="{a", body="b,c", post="")


def test_sentinel_text_is_ordinary():
    assert locate("\0OPEN\0{x}") == Group(pre="\0OPEN\0", body="x", post="")
