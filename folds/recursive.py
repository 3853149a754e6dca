"""
folds.recursive

The prelude functions again, this time written out by hand with
explicit recursion over cons lists. Each should agree with its fold
counterpart in folds.prelude; they are here to be compared against.

These recurse once per element, so they are only good for lists well
under the interpreter's recursion limit.
"""
from folds.data import List, Cons, Nil, nil
from folds.exceptions import EmptyInputError


def sum_(xs):
    match List.from_iter(xs):
        case Nil():
            return 0
        case Cons(x, rest):
            return x + sum_(rest)


def product_(xs):
    match List.from_iter(xs):
        case Nil():
            return 1
        case Cons(x, rest):
            return x * product_(rest)


def length_(xs):
    match List.from_iter(xs):
        case Nil():
            return 0
        case Cons(_, rest):
            return 1 + length_(rest)


def append_(xs, ys):
    "xs ++ ys"
    match List.from_iter(xs):
        case Nil():
            return List.from_iter(ys)
        case Cons(x, rest):
            return Cons(x, append_(rest, ys))


def reverse_(xs):
    match List.from_iter(xs):
        case Nil():
            return nil
        case Cons(x, rest):
            return append_(reverse_(rest), Cons(x, nil))


def map_(f, xs):
    match List.from_iter(xs):
        case Nil():
            return nil
        case Cons(x, rest):
            return Cons(f(x), map_(f, rest))


def filter_(p, xs):
    match List.from_iter(xs):
        case Nil():
            return nil
        case Cons(x, rest) if p(x):
            return Cons(x, filter_(p, rest))
        case Cons(_, rest):
            return filter_(p, rest)


def elem_(target, xs):
    match List.from_iter(xs):
        case Nil():
            return False
        case Cons(x, rest):
            return x == target or elem_(target, rest)


def _max_from(acc, xs):
    "the largest of acc and xs, keeping the earliest of equals"
    match xs:
        case Nil():
            return acc
        case Cons(x, rest):
            return _max_from(x if x > acc else acc, rest)


def maximum_(xs):
    match List.from_iter(xs):
        case Nil():
            raise EmptyInputError('maximum_')
        case Cons(x, rest):
            return _max_from(x, rest)


def head_(xs):
    match List.from_iter(xs):
        case Nil():
            raise EmptyInputError('head_')
        case Cons(x, _):
            return x


def last_(xs):
    match List.from_iter(xs):
        case Nil():
            raise EmptyInputError('last_')
        case Cons(x, Nil()):
            return x
        case Cons(_, rest):
            return last_(rest)
