"""
folds.lazy

A right fold that can stop early.

fold_right in folds.core needs the whole (finite) input before it can
combine anything. Here op is handed the rest of the fold as a zero
argument callable instead of a value. Elements are only pulled from
the iterable when that callable is invoked, so an op that doesn't need
the rest makes the fold terminate, even on an endless iterator:

    lazy_elem(5, itertools.count())  # True

Each call of `rest` nests another python frame, so a fold that does
consume its whole input is bounded by the recursion limit.
"""
import logging

from folds.data import Cons, nil


logger = logging.getLogger(__name__)


class Thunk:
    "a memoised zero argument callable"

    __slots__ = ('_f', '_value', 'forced')

    def __init__(self, f):
        self._f = f
        self._value = None
        self.forced = False

    def __call__(self):
        if not self.forced:
            self._value = self._f()
            self.forced = True
            self._f = None
        return self._value

    def __repr__(self):
        if self.forced:
            return f'Thunk({self._value!r})'
        return 'Thunk(...)'


def lazy_fold_right(op, seed, xs):
    """
    op(x, rest) where rest() gives the fold of everything after x.

    lazy_fold_right(op, z, [x0, x1]) == op(x0, lambda: op(x1, lambda: z))
    """
    it = iter(xs)

    def go(i):
        try:
            x = next(it)
        except StopIteration:
            return seed
        rest = Thunk(lambda: go(i + 1))
        result = op(x, rest)
        if not rest.forced:
            logger.debug("lazy_fold_right stopped early at element %d", i)
        return result
    return go(0)


def lazy_elem(target, xs):
    return lazy_fold_right(lambda x, rest: x == target or rest(), False, xs)


def find(pred, xs):
    "the first x that satisfies pred, or None"
    return lazy_fold_right(lambda x, rest: x if pred(x) else rest(), None, xs)


def take_while(pred, xs):
    "the longest prefix of xs that satisfies pred, as a cons list"
    return lazy_fold_right(
        lambda x, rest: Cons(x, rest()) if pred(x) else nil, nil, xs
    )
