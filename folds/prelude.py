"""
folds.prelude

The usual list functions, each written as a single fold. None of them
loop or recurse themselves.

Note that sum, map, filter and max shadow the builtins of the same name
in this module.
"""
import operator

from folds.core import fold_left, fold_right, fold_left1, fold_right1
from folds.data import cons, nil
from folds.util import flip, on_left


__all__ = [
    'sum', 'product', 'length', 'reverse', 'map', 'filter', 'elem',
    'max', 'head', 'last',
    'length_left', 'elem_left', 'reverse_flip', 'map_composed',
]


def sum(xs):
    return fold_left(operator.add, 0, xs)


def product(xs):
    return fold_right(operator.mul, 1, xs)


def length(xs):
    return fold_right(lambda _, acc: acc + 1, 0, xs)


def reverse(xs):
    "builds a cons list. consuming left to right and prepending reverses"
    return fold_left(lambda acc, x: cons(x, acc), nil, xs)


def map(f, xs):
    """
    the right fold prepends f(x) onto the already mapped rest,
    so the order of xs is kept
    """
    return fold_right(lambda x, acc: cons(f(x), acc), nil, xs)


def filter(p, xs):
    return fold_right(lambda x, acc: cons(x, acc) if p(x) else acc, nil, xs)


def elem(target, xs):
    return fold_right(lambda x, acc: x == target or acc, False, xs)


def max(xs):
    "raises EmptyInputError when xs is empty"
    return fold_left1(lambda acc, x: x if x > acc else acc, xs)


def head(xs):
    "raises EmptyInputError when xs is empty"
    return fold_right1(lambda x, _: x, xs)


def last(xs):
    "raises EmptyInputError when xs is empty"
    return fold_left1(lambda _, x: x, xs)


# ----------------------
#  Alternate derivations
# ----------------------


def length_left(xs):
    return fold_left(lambda acc, _: acc + 1, 0, xs)


def elem_left(target, xs):
    return fold_left(lambda acc, x: x == target or acc, False, xs)


def reverse_flip(xs):
    # flip(cons)(acc, x) == cons(x, acc)
    return fold_left(flip(cons), nil, xs)


def map_composed(f, xs):
    # ((:) . f)
    return fold_right(on_left(cons, f), nil, xs)
