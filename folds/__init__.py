"""
folds: left and right folds, and the list functions built from them.

    from folds import fold_left, fold_right
    from folds import prelude

    prelude.sum([1, 2, 3])  # 6, fold_left(add, 0, xs)
"""
import logging

from folds.core import fold_left, fold_right, fold_left1, fold_right1
from folds.data import List, Cons, Nil, nil, cons
from folds.exceptions import FoldError, EmptyInputError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "fold_left",
    "fold_right",
    "fold_left1",
    "fold_right1",
    "List",
    "Cons",
    "Nil",
    "nil",
    "cons",
    "FoldError",
    "EmptyInputError",
]
