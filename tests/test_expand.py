import pytest

from brace_expansion import BraceExpander, CacheConfig, clear_cache, expand


def test_members_keep_declaration_order():
    assert expand("a{d,c,b}e") == ["ade", "ace", "abe"]


def test_empty_pattern_expands_to_nothing():
    assert expand("") == []


def test_pattern_without_braces_is_returned_verbatim():
    assert expand("plain/path.txt") == ["plain/path.txt"]


def test_padded_numeric_sequence():
    assert expand("{01..03}") == ["01", "02", "03"]


def test_reversed_numeric_sequence():
    assert expand("{3..1}") == ["3", "2", "1"]


def test_alpha_sequence_with_step():
    assert expand("{a..e..2}") == ["a", "c", "e"]


def test_nested_comma_groups():
    assert expand("{a,{b,c},d}") == ["a", "b", "c", "d"]


def test_left_group_varies_slowest():
    assert expand("{a,b}{1,2}") == ["a1", "a2", "b1", "b2"]


def test_prefix_and_suffix_wrap_every_member():
    assert expand("file{a,b}{1,2}.txt") == [
        "filea1.txt",
        "filea2.txt",
        "fileb1.txt",
        "fileb2.txt",
    ]


def test_escaped_braces_are_not_a_group():
    assert expand("\\{a,b\\}") == ["{a,b}"]


def test_leading_empty_braces_stay_literal_at_top_level():
    assert expand("{},a}b") == ["{},a}b"]


def test_empty_braces_later_in_pattern_expand():
    assert expand("a{},b}c") == ["a}c", "abc"]


@pytest.mark.parametrize(
    "pattern",
    [
        "a{d,c,b}e",
        "{a,{b,c},d}",
        "x{{a,b}}y",
        "{01..10..3}",
        "{},a}b",
        "{a},b}",
        "a\\{b,c}",
    ],
)
def test_cache_never_changes_output(pattern):
    clear_cache()
    cold = expand(pattern)
    warm = expand(pattern)
    clear_cache()
    again = expand(pattern)
    assert cold == warm == again
    assert cold == BraceExpander().expand(pattern)


def test_returned_list_is_not_the_cached_one():
    first = expand("{a,b}")
    first.append("junk")
    assert expand("{a,b}") == ["a", "b"]


def test_instances_do_not_share_caches():
    one = BraceExpander()
    two = BraceExpander(CacheConfig(results=1, comma_parts=1, sub_expansions=1))
    one.expand("{a,b}c")
    assert "{a,b}c" in one.caches.results
    assert "{a,b}c" not in two.caches.results


def test_small_caches_give_the_same_answers():
    tiny = BraceExpander(CacheConfig(results=1, comma_parts=1, sub_expansions=1))
    roomy = BraceExpander()
    for pattern in ["{a,b}{c,d}{e,f}", "{a,{b,{c,d}}}", "{1..3}{a..b}", "{a,b}{c,d}{e,f}"]:
        assert tiny.expand(pattern) == roomy.expand(pattern)
    assert len(tiny.caches.results) == 1
    assert len(tiny.caches.sub_expansions) == 1


def test_each_suffix_is_cached_as_a_sub_expansion():
    e = BraceExpander()
    assert e.expand("{a,b}{c,d}{e,f}")[:2] == ["ace", "acf"]
    assert e.caches.sub_expansions.get("{c,d}{e,f}") == ["ce", "cf", "de", "df"]
    assert e.caches.sub_expansions.get("{e,f}") == ["e", "f"]
    assert "{a,b}{c,d}{e,f}" not in e.caches.sub_expansions
