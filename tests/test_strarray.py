from pyhtab.strarray import (
    create_str_array,
    free_str_array,
    init_str_array,
    str_array_add,
    str_array_clear,
    str_array_find,
)


def test_str_array():
    arr = init_str_array()
    # should refuse to add before creation
    assert str_array_add(arr, "a") == -1
    assert str_array_find(arr, "a") == -1

    assert create_str_array(arr, 1)
    assert arr.max == 1

    n = 10
    for i in range(n):
        assert str_array_add(arr, str(i)) == i

    # should have doubled from 1 to 16
    assert arr.max == 16
    assert arr.index == n

    for i in range(n):
        assert str_array_find(arr, str(i)) == i
    assert str_array_find(arr, "missing") == -1
    assert str_array_find(arr, None) == -1
    assert str_array_add(arr, None) == -1


def test_duplicates_keep_first_position():
    arr = init_str_array()
    create_str_array(arr)

    assert str_array_add(arr, "x") == 0
    assert str_array_add(arr, "y") == 1
    assert str_array_add(arr, "x") == 2
    assert str_array_find(arr, "x") == 0


def test_clear_and_free(capsys):
    arr = init_str_array()
    create_str_array(arr, 4)
    str_array_add(arr, "a")
    str_array_add(arr, "b")

    str_array_clear(arr)
    assert arr.index == 0
    assert arr.max == 4
    assert str_array_find(arr, "a") == -1
    assert str_array_add(arr, "c") == 0

    # should refuse to re-create a live array
    assert not create_str_array(arr, 8)
    assert "non empty array" in capsys.readouterr().err

    free_str_array(arr)
    assert arr.strings is None
    assert str_array_add(arr, "d") == -1

    # should do nothing when already freed or never created
    free_str_array(arr)
    free_str_array(init_str_array())
    free_str_array(None)

    assert create_str_array(arr, 0)
    assert arr.max == 1


def test_missing_array():
    # should refuse quietly without an array object
    assert not create_str_array(None)
    assert str_array_add(None, "a") == -1
    assert str_array_find(None, "a") == -1
    str_array_clear(None)
