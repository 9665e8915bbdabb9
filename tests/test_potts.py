import numpy as np

from algos.potts import clone_sizes, create_lattice, lattice_cost


def test_create_lattice_shape_and_range():
    lattice = create_lattice(3, 2)
    assert lattice.shape == (3, 3)
    assert lattice.min() >= 0
    assert lattice.max() < 2


def test_create_lattice_is_reproducible():
    first = create_lattice(4, 3, seed=1)
    second = create_lattice(4, 3, seed=1)
    assert first.shape == (4, 4)
    assert first.min() >= 0
    assert first.max() < 3
    assert first.tolist() == second.tolist()


def test_clone_sizes_cover_every_cell():
    lattice = create_lattice(5, 3)
    sizes = clone_sizes(lattice)
    assert sum(sizes.values()) == 25
    assert set(sizes) <= {0, 1, 2}


def test_clone_sizes_small_lattice():
    assert clone_sizes(np.array([[0, 1], [1, 1]])) == {0: 1, 1: 3}


def test_uniform_lattice_has_no_cost():
    assert lattice_cost(np.zeros((4, 4), dtype=int)) == 0.0


def test_checkerboard_cost():
    assert lattice_cost(np.array([[0, 1], [1, 0]])) == 8.0


def test_cost_is_even_and_symmetric():
    lattice = create_lattice(6, 3)
    cost = lattice_cost(lattice)
    assert cost >= 0
    assert cost % 2 == 0
    assert lattice_cost(lattice.T) == cost