from match3.components.swap import Swap


def test_swap_equality_is_unordered():
    assert Swap((0, 0), (0, 1)) == Swap((0, 1), (0, 0))
    assert hash(Swap((0, 0), (0, 1))) == hash(Swap((0, 1), (0, 0)))
    assert Swap((0, 0), (0, 1)) in {Swap((0, 1), (0, 0))}
    assert Swap((0, 0), (0, 1)) != Swap((0, 0), (1, 0))


def test_swap_normalizes_lists_to_tuples():
    swap = Swap([2, 3], [2, 4])
    assert swap.first == (2, 3)
    assert swap == Swap((2, 4), (2, 3))


def test_degenerate_and_adjacency_flags():
    assert Swap((1, 1), (1, 1)).is_degenerate
    assert not Swap((1, 1), (1, 1)).is_adjacent
    assert Swap((1, 1), (2, 1)).is_adjacent
    assert not Swap((1, 1), (2, 2)).is_adjacent
    assert not Swap((1, 1), (1, 3)).is_adjacent
