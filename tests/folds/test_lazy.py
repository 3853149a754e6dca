import itertools
import logging

from folds.data import List, nil
from folds.lazy import Thunk, lazy_fold_right, lazy_elem, find, take_while


def test_thunk():
    calls = []

    def f():
        calls.append(1)
        return 42

    t = Thunk(f)
    assert repr(t) == 'Thunk(...)'
    assert not t.forced
    assert t() == 42
    assert t() == 42
    assert t.forced
    assert calls == [1]
    assert repr(t) == 'Thunk(42)'


def test_lazy_fold_right__finite():
    assert lazy_fold_right(lambda x, rest: x + rest(), 0, [1, 2, 3]) == 6
    assert lazy_fold_right(lambda x, rest: x - rest(), 0, [1, 2, 3, 4]) == -2
    assert lazy_fold_right(lambda x, rest: x + rest(), 'seed', []) == 'seed'


def test_lazy_fold_right__stops_pulling():
    pulled = []

    def source():
        for i in itertools.count():
            pulled.append(i)
            yield i

    assert lazy_fold_right(
        lambda x, rest: x if x == 3 else rest(), None, source()
    ) == 3
    assert pulled == [0, 1, 2, 3]


def test_lazy_fold_right__rest_forced_once():
    pulled = []

    def source():
        for i in [1, 2, 3]:
            pulled.append(i)
            yield i

    assert lazy_fold_right(lambda x, rest: rest() + rest() + x, 0, source()) \
        == 17
    assert pulled == [1, 2, 3]


def test_lazy_fold_right__short_circuit_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger='folds.lazy'):
        lazy_elem(2, itertools.count())
    assert 'stopped early at element 2' in caplog.text


def test_lazy_elem():
    assert lazy_elem(5, itertools.count()) is True
    assert lazy_elem(5, [1, 2, 3]) is False
    assert lazy_elem(5, []) is False


def test_find():
    assert find(lambda x: x * x > 50, itertools.count()) == 8
    assert find(lambda x: x > 10, [1, 2, 3]) is None


def test_take_while():
    assert take_while(lambda x: x < 4, itertools.count()) == \
        List.from_iter([0, 1, 2, 3])
    assert take_while(lambda x: x < 4, [5, 1]) is nil
    assert take_while(lambda x: x < 4, [1, 2]) == List.from_iter([1, 2])
