from algos.min_mutations import min_mutations


def test_single_mutation():
    assert min_mutations("AACCGGTT", "AACCGGTA", ["AACCGGTA"]) == 1


def test_two_mutations():
    bank = ["AACCGGTA", "AACCGCTA", "AAACGGTA"]
    assert min_mutations("AACCGGTT", "AAACGGTA", bank) == 2


def test_end_not_in_bank():
    assert min_mutations("AACCGGTT", "AACCGGTA", []) == -1


def test_start_equals_end_in_bank():
    assert min_mutations("AACCGGTT", "AACCGGTT", ["AACCGGTT"]) == 0


def test_unreachable_end():
    assert min_mutations("AAAAAAAA", "CCCCCCCC", ["CCCCCCCC"]) == -1


def test_three_mutations():
    bank = ["AAAACCCC", "AAACCCCC", "AACCCCCC"]
    assert min_mutations("AAAAACCC", "AACCCCCC", bank) == 3