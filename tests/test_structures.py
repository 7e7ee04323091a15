import pytest

from algosuite.structures import BrowserHistory, SmallestInfiniteSet, WordDictionary


@pytest.fixture
def words():
    dictionary = WordDictionary()
    for word in ("bad", "dad", "mad"):
        dictionary.add_word(word)
    return dictionary


def test_word_dictionary_exact(words):
    assert words.search("bad") is True
    assert words.search("pad") is False


def test_word_dictionary_wildcards(words):
    assert words.search(".ad") is True
    assert words.search("b..") is True
    assert words.search("...") is True
    assert words.search("..e") is False
    assert words.search("....") is False


def test_word_dictionary_prefix_is_not_word(words):
    assert words.search("ba") is False
    assert words.search("..") is False


def test_word_dictionary_empty_word():
    dictionary = WordDictionary()
    assert dictionary.search("") is False
    dictionary.add_word("")
    assert dictionary.search("") is True


def test_browser_history_navigation():
    pages = ["home.example", "a.example", "b.example", "c.example", "d.example"]
    history = BrowserHistory(pages[0])
    for page in pages[1:4]:
        history.visit(page)
    assert history.back(1) == pages[2]
    assert history.back(1) == pages[1]
    assert history.forward(1) == pages[2]
    history.visit(pages[4])
    assert history.forward(2) == pages[4]
    assert history.back(2) == pages[1]
    assert history.back(7) == pages[0]


def test_browser_history_visit_clears_forward():
    history = BrowserHistory("start.example")
    history.visit("first.example")
    history.visit("second.example")
    history.back(2)
    history.visit("other.example")
    assert history.forward(5) == "other.example"
    assert history.back(1) == "start.example"


def test_smallest_infinite_set_pops_in_order():
    numbers = SmallestInfiniteSet()
    assert [numbers.pop_smallest() for _ in range(5)] == list(range(1, 6))


def test_smallest_infinite_set_add_back():
    numbers = SmallestInfiniteSet()
    popped = [numbers.pop_smallest() for _ in range(3)]
    numbers.add_back(popped[1])
    numbers.add_back(popped[0])
    assert numbers.pop_smallest() == popped[0]
    assert numbers.pop_smallest() == popped[1]
    assert numbers.pop_smallest() == popped[2] + 1


def test_smallest_infinite_set_add_present_number_has_no_effect():
    numbers = SmallestInfiniteSet()
    numbers.add_back(2)
    numbers.add_back(10)
    assert [numbers.pop_smallest() for _ in range(3)] == [1, 2, 3]


def test_smallest_infinite_set_goes_past_a_thousand():
    numbers = SmallestInfiniteSet()
    values = [numbers.pop_smallest() for _ in range(1005)]
    assert values == list(range(1, 1006))


def test_smallest_infinite_set_rejects_non_positive():
    numbers = SmallestInfiniteSet()
    with pytest.raises(ValueError):
        numbers.add_back(0)