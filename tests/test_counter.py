from algos.counter import ValueCounter


def test_counter_integers():
    ctr = ValueCounter()
    for value in (13, 14, 16, 14, 14, 11):
        ctr.count(value)
    seen = {i: ctr.times_seen(i) for i in range(10, 20)}
    assert seen == {10: 0, 11: 1, 12: 0, 13: 1, 14: 3, 15: 0, 16: 1, 17: 0, 18: 0, 19: 0}


def test_counter_strings():
    ctr = ValueCounter()
    for fruit in ("apple", "orange", "apple"):
        ctr.count(fruit)
    assert ctr.times_seen("apple") == 2
    assert ctr.times_seen("orange") == 1
    assert ctr.times_seen("pear") == 0