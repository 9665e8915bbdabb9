from algos.majority import majority_element


def test_majority_element_one():
    assert majority_element([3, 2, 3]) == 3


def test_majority_element_two():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


def test_no_strict_majority_returns_most_frequent():
    assert majority_element([1, 2, 3, 2, 1, 2, 4]) == 2


def test_empty_returns_minus_one():
    assert majority_element([]) == -1


def test_single_element():
    assert majority_element([7]) == 7