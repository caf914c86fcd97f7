import pytest

from algokit.search import binary_search

ITEMS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_binary_search_example():
    assert binary_search(ITEMS, 7) == ITEMS.index(7)


@pytest.mark.parametrize("target", ITEMS)
def test_binary_search_finds_every_element(target):
    assert ITEMS[binary_search(ITEMS, target)] == target


@pytest.mark.parametrize("target", [0, 11, -5])
def test_binary_search_missing(target):
    with pytest.raises(ValueError):
        binary_search(ITEMS, target)


def test_binary_search_empty():
    with pytest.raises(ValueError):
        binary_search([], 1)


def test_binary_search_with_duplicates():
    items = [1, 2, 2, 2, 3]
    assert items[binary_search(items, 2)] == 2


def test_binary_search_strings():
    words = ["apple", "banana", "cherry", "date"]
    assert binary_search(words, "cherry") == words.index("cherry")