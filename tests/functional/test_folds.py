import pytest
from consfold.core import EMPTY, NotASequence, cons, from_iterable, seq
from consfold.functional import left_fold, right_fold


def add(x, acc):
    return acc + x


def append_digit(x, acc):
    return acc + str(x)


def test_left_fold_sums():
    assert left_fold(seq(1, 2, 3), 0, add) == 6


def test_folds_on_empty_return_initial():
    marker = object()
    assert left_fold(EMPTY, marker, add) is marker
    assert right_fold(EMPTY, marker, add) is marker


def test_left_fold_runs_first_to_last():
    assert left_fold(seq(1, 2, 3), "", append_digit) == "123"


def test_right_fold_runs_last_to_first():
    assert right_fold(seq(1, 2, 3), "", append_digit) == "321"


def test_right_fold_with_cons_reconstructs_input():
    numbers = seq(1, 2, 3)
    assert right_fold(numbers, EMPTY, cons) == numbers


def test_left_fold_with_cons_reverses_input():
    assert left_fold(seq(1, 2, 3), EMPTY, cons) == seq(3, 2, 1)


def test_combine_receives_element_then_accumulator():
    calls = []

    def record(x, acc):
        calls.append((x, acc))
        return acc + 1

    right_fold(seq("a", "b"), 0, record)
    assert calls == [("b", 0), ("a", 1)]

    calls.clear()
    left_fold(seq("a", "b"), 0, record)
    assert calls == [("a", 0), ("b", 1)]


def test_commutative_combine_agrees_in_both_directions():
    numbers = from_iterable(range(10))
    assert left_fold(numbers, 0, add) == right_fold(numbers, 0, add) == 45


@pytest.mark.parametrize("fold", [left_fold, right_fold])
def test_folds_reject_non_sequences(fold):
    with pytest.raises(NotASequence):
        fold([1, 2, 3], 0, add)


@pytest.mark.parametrize("fold", [left_fold, right_fold])
def test_folds_reject_non_callable_combine(fold):
    with pytest.raises(TypeError, match="combine must be callable"):
        fold(seq(1), 0, "add")


@pytest.mark.parametrize("fold", [left_fold, right_fold])
def test_folds_long_input(fold):
    numbers = from_iterable(range(100_000))
    assert fold(numbers, 0, add) == sum(range(100_000))
