import pytest

from indenty.nonempty import NonEmptyList, NonEmptyError


def test_first_and_last():
    items = NonEmptyList('a', ['b', 'c'])
    assert items.first == 'a'
    assert items.last == 'c'
    assert len(items) == 3
    assert list(items) == ['a', 'b', 'c']
    assert items[1] == 'b'
    assert items[1:] == ['b', 'c']


def test_append_and_pop():
    items = NonEmptyList(1)
    items.append(2)
    assert items.last == 2
    assert items.pop() == 2
    assert items.to_list() == [1]


def test_cannot_pop_last_item():
    items = NonEmptyList(1)
    with pytest.raises(NonEmptyError):
        items.pop()
    assert items.to_list() == [1]


def test_pop_error_is_index_error():
    with pytest.raises(IndexError):
        NonEmptyList(1).pop()


def test_to_list_is_a_copy():
    items = NonEmptyList(1)
    items.to_list().append(2)
    assert len(items) == 1


def test_equality():
    assert NonEmptyList(1, [2]) == NonEmptyList(1, [2])
    assert NonEmptyList(1, [2]) != NonEmptyList(1)
    assert NonEmptyList(1) != [1]
