"""
This module provides the `Analysis` class, which owns the sets
derived from a single grammar.

    >>> from ll1table.grammar import Grammar
    >>> g = Grammar(['a', 'b'], ['S', 'A', 'B'], 'S', {
    ...     'S': [['A', 'a'], ['B']],
    ...     'A': [['a'], []],
    ...     'B': [['b'], []]})
    >>> a = Analysis(g)
    >>> sorted(a.epsilon())
    ['A', 'B', 'S']
    >>> sorted(a.first()['S'])
    ['a', 'b']
    >>> sorted(a.follow()['A'])
    ['a']

Each set is computed on first demand and then kept for the lifetime
of the analysis; later calls return the very same object.

    >>> a.table() is a.table()
    True
"""

import threading
from .epsilon import compute_epsilon
from .first import First
from .follow import Follow
from .ll1table import build_table

class _Once:
    """Computes a value at most once, even when requested from several threads."""
    def __init__(self, fn):
        self._fn = fn
        self._lock = threading.Lock()
        self._done = False
        self._value = None

    def __call__(self):
        if not self._done:
            with self._lock:
                if not self._done:
                    self._value = self._fn()
                    self._done = True
        return self._value

class Analysis:
    """An analysis session for a grammar.

    The solvers run strictly in order: the epsilon set first, then FIRST,
    then FOLLOW and finally the parsing table. Each stage is computed
    from the complete results of the previous one.
    """
    def __init__(self, grammar):
        self.grammar = grammar
        self._epsilon = _Once(lambda: compute_epsilon(grammar))
        self._first = _Once(lambda: First(grammar, self._epsilon()))
        self._follow = _Once(lambda: Follow(grammar, self._first()))
        self._table = _Once(lambda: build_table(grammar, self._first(), self._follow()))

    def epsilon(self):
        """Returns the frozenset of nullable non-terminals."""
        return self._epsilon()

    def first(self):
        """Returns the `First` object; index it with a symbol to get its FIRST set."""
        return self._first()

    def follow(self):
        """Returns the `Follow` object; index it with a non-terminal to get its FOLLOW set."""
        return self._follow()

    def table(self):
        return self._table()

    def is_nullable(self, word):
        return self.first().is_nullable(word)
