"""
folds.core

The four fold primitives. Everything in folds.prelude is one of these
with a combining operation (and maybe a seed) filled in.

fold_left and fold_left1 call op(acc, x).
fold_right and fold_right1 call op(x, acc).
"""
import logging
from functools import reduce
from typing import Callable, Iterable, Iterator, TypeVar

from folds.exceptions import EmptyInputError
from folds.util import flip


logger = logging.getLogger(__name__)

A = TypeVar('A')
B = TypeVar('B')


def _backwards(xs: Iterable[A]) -> Iterator[A]:
    "iterate xs from the last element to the first"
    try:
        rev_it = reversed(xs)
    except TypeError:
        # not reversible
        rev_it = reversed(tuple(xs))
    # Cons.__reversed__ hands back a list rather than an iterator
    return iter(rev_it)


def _empty(operation):
    logger.debug("%s called with an empty sequence", operation)
    return EmptyInputError(operation)


def fold_left(op: Callable[[B, A], B], seed: B, xs: Iterable[A]) -> B:
    """
    foldl :: (b -> a -> b) -> b -> [a] -> b

    fold_left(op, z, [x0, x1, x2]) == op(op(op(z, x0), x1), x2)
    """
    return reduce(op, xs, seed)


def fold_right(op: Callable[[A, B], B], seed: B, xs: Iterable[A]) -> B:
    """
    foldr :: (a -> b -> b) -> b -> [a] -> b

    fold_right(op, z, [x0, x1, x2]) == op(x0, op(x1, op(x2, z)))

    The input must be finite. This is a left fold of the flipped op over
    the reversed input: the same inner results get computed in the same
    order as the recursive definition, without using up the stack.
    """
    return fold_left(flip(op), seed, _backwards(xs))


def fold_left1(op: Callable[[A, A], A], xs: Iterable[A]) -> A:
    """
    foldl1 :: (a -> a -> a) -> [a] -> a

    fold_left with the first element as the seed.
    Raises EmptyInputError if xs is empty.
    """
    it = iter(xs)
    try:
        first = next(it)
    except StopIteration:
        raise _empty('fold_left1') from None
    return fold_left(op, first, it)


def fold_right1(op: Callable[[A, A], A], xs: Iterable[A]) -> A:
    """
    foldr1 :: (a -> a -> a) -> [a] -> a

    fold_right with the last element as the seed.
    Raises EmptyInputError if xs is empty.
    """
    rev_it = _backwards(xs)
    try:
        last = next(rev_it)
    except StopIteration:
        raise _empty('fold_right1') from None
    return fold_left(flip(op), last, rev_it)
