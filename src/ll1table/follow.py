"""
This module provides the FOLLOW sets of a grammar.

FOLLOW(A) is the set of terminals that can immediately follow
the non-terminal A in some sentential form derived from the augmented
start symbol. Since the augmented start symbol derives the original
start symbol followed by the end-of-input marker, FOLLOW of the original
start symbol always contains the marker.

>>> from ll1table.grammar import Grammar
>>> g = Grammar(['+', '*', 'a', 'b'], ['E', "E'", 'T', "T'", 'F'], 'E', {
...     'E': [['T', "E'"]],
...     "E'": [['+', 'T', "E'"], []],
...     'T': [['F', "T'"]],
...     "T'": [['*', 'F', "T'"], []],
...     'F': [['a'], ['b']]})
>>> f = Follow(g)
>>> sorted(f['E']), sorted(f["E'"])
(['$'], ['$'])
>>> sorted(f['T']), sorted(f["T'"])
(['$', '+'], ['$', '+'])
>>> sorted(f['F'])
['$', '*', '+']
"""

from .first import First
from .production import END_OF_INPUT

class Follow:
    """Represents the FOLLOW sets for a given grammar.

    The computation always starts from a complete `First` object,
    which is built here unless one is supplied.
    """
    def __init__(self, grammar, first=None):
        self.grammar = grammar
        self.first = First(grammar) if first is None else first

        table = dict((nonterm, set()) for nonterm in grammar.nonterms())
        table[grammar.augmented_start()].add(END_OF_INPUT)

        # For every occurrence of a non-terminal B in 'A = alpha B beta;',
        # FIRST(beta) is added to FOLLOW(B), and so is FOLLOW(A) if beta is nullable.
        done = False
        while not done:
            done = True
            for rule in grammar:
                for i, symbol in enumerate(rule.right):
                    if symbol not in table:
                        continue

                    target = table[symbol]
                    suffix = rule.right[i + 1:]

                    new = set(self.first.of_sequence(suffix))
                    if self.first.is_nullable(suffix):
                        new.update(table[rule.left])

                    if not new <= target:
                        target.update(new)
                        done = False

        self.table = dict((nonterm, frozenset(terminals)) for nonterm, terminals in table.items())

    def __getitem__(self, nonterm):
        return self.table[nonterm]

def compute_follow(grammar):
    """Returns a dict mapping every non-terminal of the grammar to its FOLLOW set."""
    return dict(Follow(grammar).table)
