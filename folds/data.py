from dataclasses import dataclass
from typing import Any


# ----------------
#  Cons Lists
# ----------------


class List:

    __slots__ = ()

    @staticmethod
    def from_iter(it):
        if isinstance(it, List):
            return it

        try:
            rev_it = reversed(it)
        except TypeError:
            # not reversible
            rev_it = reversed(tuple(it))
        xs = nil
        for x in rev_it:
            xs = Cons(x, xs)
        return xs


class Nil(List):

    __slots__ = ()

    def __repr__(self):
        return '()'

    def __len__(self):
        return 0

    def __iter__(self):
        yield from ()

    def __reversed__(self):
        return self


nil = Nil()
# all instances of Nil() are nil
Nil.__new__ = lambda cls: nil


# eq is written by hand so that comparing long lists doesn't recurse
@dataclass(frozen=True, slots=True, eq=False)
class Cons(List):
    hd: Any
    tl: List

    def __post_init__(self):
        assert isinstance(self.tl, List), type(self.tl)

    def __iter__(self):
        cons = self
        while cons is not nil:
            yield cons.hd
            cons = cons.tl

    def __reversed__(self):
        result = nil
        for x in self:
            result = Cons(x, result)
        return result

    def __repr__(self):
        return '(' + ' '.join(map(repr, self)) + ')'

    def __bool__(self):
        return True

    def __len__(self):
        return sum(map(lambda _: 1, self), 0)

    def __eq__(self, o):
        if not isinstance(o, Cons):
            return NotImplemented
        xs, ys = self, o
        while xs is not nil and ys is not nil:
            if xs is ys:
                return True
            if xs.hd != ys.hd:
                return False
            xs, ys = xs.tl, ys.tl
        return xs is ys

    def __hash__(self):
        return hash(tuple(self))


def cons(x, xs):
    "prepend x onto the list xs"
    return Cons(x, xs)
