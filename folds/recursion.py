"""
folds.recursion

Recursion scheme functions used to fold and unfold the binary tree.

Most of these have been derived from the slide from Tim Williams
talk https://github.com/willtim/recursion-schemes/
"""


def cata_f(fmap, unfix=lambda x: x):
    """
    generalised fold-right over any functor. takes the fmap for that functor

    cata alg = alg . fmap (cata alg) . unfix
    """
    def cata(alg):
        return lambda fa: alg(fmap(cata(alg), unfix(fa)))
    return cata


def ana_f(fmap, fix=lambda x: x):
    """
    generalised unfold.
    we can use it for top down constructions

    ana :: Functor f => (a -> f a) -> a -> Fix f
    ana coalg = Fix . fmap (ana coalg) . coalg
    """
    def ana(coalg):
        return lambda a: fix(fmap(ana(coalg), coalg(a)))
    return ana


def compose(*fs):
    "compose functions of a single argument. compose(f, g)(x) == f(g(x))"
    def composed(x):
        for f in reversed(fs):
            x = f(x)
        return x
    return composed
