import pytest

from algosuite.strings import (
    is_scramble,
    is_valid_parentheses,
    longest_palindrome_subseq,
    max_vowels,
    merge_alternately,
    min_insertions,
    partition_string,
    remove_stars,
    simplify_path,
)

VALID_BRACKETS = ["", "()", "[]{}", "([{}])", "(()[]){}"]
PATHS = ["/home/", "/../", "/home//foo/", "/a/./b/../../c/", "a/b/../c", "/.../x/.", ""]
PALINDROMES = ["a", "aa", "aba", "racecar", "abccba"]
WORDS = ["abcde", "bbbab", "leetcode", "mbadm", "zzazz", "ab"]


@pytest.mark.parametrize("valid", VALID_BRACKETS)
def test_nesting_and_concatenation_keep_brackets_valid(valid):
    assert is_valid_parentheses(valid)
    assert is_valid_parentheses("(" + valid + ")")
    assert is_valid_parentheses("[" + valid + "]" + valid + "{}")


@pytest.mark.parametrize("valid", [v for v in VALID_BRACKETS if v])
def test_dropping_a_bracket_breaks_validity(valid):
    assert not is_valid_parentheses(valid[1:])
    assert not is_valid_parentheses(valid[:-1])


@pytest.mark.parametrize("text", ["(]", "([)]", "]", "(", "a", "(a)"])
def test_mismatched_or_foreign_characters_are_invalid(text):
    assert not is_valid_parentheses(text)


def test_simplify_path_pinned_values():
    assert simplify_path("/../") == "/"
    assert simplify_path("/a/./b/../../c/") == "/c"


@pytest.mark.parametrize("path", PATHS)
def test_simplify_path_is_canonical_and_idempotent(path):
    result = simplify_path(path)
    assert result.startswith("/")
    assert "//" not in result
    parts = result.split("/")[1:]
    assert "." not in parts and ".." not in parts
    assert simplify_path(result) == result


def test_simplify_path_removes_trailing_slash():
    assert simplify_path("/home/") == simplify_path("/home")


@pytest.mark.parametrize("word", WORDS)
def test_string_is_scramble_of_itself_and_its_reverse(word):
    assert is_scramble(word, word)
    assert is_scramble(word, word[::-1])


def test_scramble_known_cases():
    assert is_scramble("great", "rgeat")
    assert not is_scramble("abcde", "caebd")


def test_scramble_rejects_other_letters_and_lengths():
    assert not is_scramble("abc", "abd")
    assert not is_scramble("abc", "abcd")


def test_longest_palindrome_subseq_pinned():
    assert longest_palindrome_subseq("bbbab") == 4


@pytest.mark.parametrize("word", PALINDROMES)
def test_palindromes_are_their_own_longest_subsequence(word):
    assert longest_palindrome_subseq(word) == len(word)
    assert min_insertions(word) == 0


@pytest.mark.parametrize("word", WORDS)
def test_palindrome_subsequence_bounds_and_symmetry(word):
    result = longest_palindrome_subseq(word)
    assert 1 <= result <= len(word)
    assert longest_palindrome_subseq(word[::-1]) == result


def test_empty_string_palindromes():
    assert longest_palindrome_subseq("") == 0
    assert min_insertions("") == 0


@pytest.mark.parametrize("word", WORDS)
def test_min_insertions_bounds(word):
    assert 0 <= min_insertions(word) <= len(word) - 1
    assert min_insertions(word + word[::-1]) == 0


def test_max_vowels_pinned():
    assert max_vowels("abciiidef", 3) == 3


@pytest.mark.parametrize("word", WORDS)
def test_max_vowels_window_covering_everything(word):
    expected = sum(char in "aeiou" for char in word)
    assert max_vowels(word, len(word)) == expected
    assert max_vowels(word, len(word) + 5) == expected


def test_max_vowels_of_all_vowels_is_window_size():
    assert max_vowels("aeiouaeiou", 4) == 4


def test_max_vowels_rejects_empty_window():
    with pytest.raises(ValueError):
        max_vowels("abc", 0)


@pytest.mark.parametrize("first,second", [("abc", "pqr"), ("ab", "pqrs"), ("abcd", "pq"), ("", "xy")])
def test_merge_alternately_interleaves(first, second):
    result = merge_alternately(first, second)
    shared = min(len(first), len(second))
    assert len(result) == len(first) + len(second)
    assert result[: 2 * shared : 2] == first[:shared]
    assert result[1 : 2 * shared : 2] == second[:shared]
    longer = first if len(first) > len(second) else second
    assert result[2 * shared :] == longer[shared:]


@pytest.mark.parametrize("word", WORDS)
def test_remove_stars_properties(word):
    assert remove_stars(word) == word
    assert remove_stars(word + "x*") == word
    assert remove_stars("".join(char + "*" for char in word)) == ""


def test_remove_stars_without_a_character_raises():
    with pytest.raises(ValueError):
        remove_stars("*ab")


def test_partition_string_properties():
    assert partition_string("abcdef") == 1
    assert partition_string("aaaa") == len("aaaa")
    assert partition_string("abc" + "abc") == partition_string("abc") * 2