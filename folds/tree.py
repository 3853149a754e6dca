"""
folds.tree

A binary tree with values at the leaves, and the ways of folding it.

fold_tree is the structural fold (a catamorphism) over the tree's own
shape. For the list style folds we go through flatten, which lays the
leaves out left to right as a cons list, and hand that to folds.core.
"""
from dataclasses import dataclass
from functools import partial
from typing import Any, Generic, TypeVar

from folds.core import fold_left, fold_right
from folds.data import Cons, nil
from folds.recursion import cata_f, ana_f, compose
from folds.util import identity


E = TypeVar('E')


@dataclass(frozen=True, slots=True)
class BinaryTree(Generic[E]):
    pass


@dataclass(frozen=True, slots=True)
class Empty(BinaryTree):
    pass


@dataclass(frozen=True, slots=True)
class Leaf(BinaryTree):
    value: Any


@dataclass(frozen=True, slots=True)
class Branch(BinaryTree):
    # E is BinaryTree until we fold or unfold, then it is whatever the
    # algebra or coalgebra works with
    left: E
    right: E


def fmap_tree(f, fa):
    match fa:
        case Branch(left, right):
            return Branch(f(left), f(right))
        case Leaf() | Empty():
            return fa
        case _:
            raise TypeError(f"not a BinaryTree: {fa!r}")


_cata = cata_f(fmap_tree)
_ana = ana_f(fmap_tree)


def fold_tree(branch, leaf, empty):
    """
    foldB :: (b -> b -> b) -> (a -> b) -> b -> BinaryTree a -> b

    Returns a function of the tree. Both subtrees of each branch are
    folded before branch combines them.
    """
    def alg(layer):
        match layer:
            case Branch(left, right):
                return branch(left, right)
            case Leaf(x):
                return leaf(x)
            case Empty():
                return empty
            case _:
                raise TypeError(f"not a BinaryTree: {layer!r}")
    return _cata(alg)


def fold_map(f, tree, mappend, mempty):
    "map each leaf into a monoid given by (mappend, mempty) and combine"
    return fold_tree(mappend, f, mempty)(tree)


def flatten(tree):
    "the leaf values, left to right, as a cons list"
    # each subtree becomes a function that prepends its leaves onto a
    # list, so the whole thing is built without any appends
    prepend_all = fold_tree(compose, partial(partial, Cons), identity)
    return prepend_all(tree)(nil)


def tree_fold_right(op, seed, tree):
    """
    foldr f z (Branch l r) == foldr f (foldr f z r) l
    """
    return fold_right(op, seed, flatten(tree))


def tree_fold_left(op, seed, tree):
    return fold_left(op, seed, flatten(tree))


def from_iter(xs):
    "a balanced tree whose leaves, left to right, are xs"
    def coalg(seq):
        match len(seq):
            case 0:
                return Empty()
            case 1:
                return Leaf(seq[0])
            case n:
                return Branch(seq[:n // 2], seq[n // 2:])
    return _ana(coalg)(tuple(xs))


size = fold_tree(lambda left, right: left + right, lambda _: 1, 0)
size.__doc__ = "number of leaves"


def _one_deeper(left, right):
    deepest = max(left, right)
    # a branch with no leaves under it counts as Empty
    return deepest + 1 if deepest else 0


depth = fold_tree(_one_deeper, lambda _: 1, 0)
depth.__doc__ = "levels from the root to the deepest leaf, Empty has none"

show_tree = fold_tree(lambda left, right: f'({left} {right})', repr, '_')
show_tree.__doc__ = "e.g. (1 (2 3)). Empty subtrees show as _"
