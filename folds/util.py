# Small combinators for writing combining operations point-free


def identity(x):
    return x


def const(x):
    "const(x)(y) == x"
    return lambda _: x


def flip(f):
    """flip(f)(a, b) == f(b, a)

    turns a right-fold operation into a left-fold one and back again.
    e.g. flip(cons) is the left-fold step that builds a reversed list
    """
    return lambda a, b: f(b, a)


def on_left(g, f):
    """
    apply f to the first argument before handing both to g.
    on_left(cons, f) is haskell's ((:) . f)
    """
    return lambda a, b: g(f(a), b)
