"""
This module provides the FIRST sets of a grammar.

A word is any iterable of symbols, i.e. ('T', "E'") is a word.
FIRST of a word is the set of terminals that can begin a string
derived from the word. The empty string is never a member of a FIRST set;
whether a word can derive the empty string is answered separately
by `First.is_nullable`.
"""

from .epsilon import compute_epsilon
from .production import EPSILON

class First:
    """Represents the FIRST sets for a given grammar.

    The sets for all symbols are computed during construction.

    >>> from ll1table.grammar import Grammar
    >>> g = Grammar(['a', 'b'], ['S', 'A'], 'S', {
    ...     'S': [['A', 'a'], ['b']],
    ...     'A': [['a']]})
    >>> f = First(g)
    >>> sorted(f['S'])
    ['a', 'b']
    >>> sorted(f['A'])
    ['a']
    >>> sorted(f['b'])
    ['b']

    The objects are callable and, for a given word, return its FIRST set.

    >>> sorted(f(('A', 'b')))
    ['a']
    >>> sorted(f(()))
    []
    >>> f.is_nullable(())
    True
    >>> f.is_nullable('A')
    False
    """
    def __init__(self, grammar, epsilon=None):
        """
        Given a grammar, constructs the first-set table for all symbols.
        The epsilon set is computed first, unless it is supplied.
        """
        self.grammar = grammar
        self.epsilon = compute_epsilon(grammar) if epsilon is None else frozenset(epsilon)

        table = dict((terminal, set([terminal])) for terminal in grammar.terminals())
        for nonterm in grammar.nonterms():
            table[nonterm] = set()

        # The sets in the table start empty and are iteratively filled.
        # The termination is guaranteed by the existence of the least fixed point.
        done = False
        while not done:
            done = True
            for rule in grammar:
                target = table[rule.left]
                for symbol in rule.right:
                    if not table[symbol] <= target:
                        target.update(table[symbol])
                        done = False
                    if symbol not in self.epsilon:
                        break

        self.table = dict((symbol, frozenset(terminals)) for symbol, terminals in table.items())

    def __getitem__(self, symbol):
        return self.table[symbol]

    def __call__(self, word):
        """Returns FIRST(word) with respect to the associated grammar."""
        return self.of_sequence(word)

    def of_sequence(self, word):
        res = set()
        for symbol in word:
            if symbol == EPSILON:
                continue
            res.update(self.table[symbol])
            if symbol not in self.epsilon:
                break
        return frozenset(res)

    def is_nullable(self, word):
        """Tests whether a symbol or a word derives the empty string.

        A string is taken to be a single symbol, any other iterable a word.
        """
        if isinstance(word, str):
            return word == EPSILON or word in self.epsilon
        return all(symbol in self.epsilon for symbol in word)

def compute_first(grammar):
    """Returns a dict mapping every symbol of the grammar to its FIRST set."""
    return dict(First(grammar).table)
