"""
Computes the set of non-terminals deriving the empty string.

A non-terminal is nullable if it owns a production whose right side
consists only of nullable symbols. An empty right side is vacuously nullable.

>>> from ll1table.grammar import Grammar
>>> g = Grammar(['a', 'b'], ['S', 'A', 'B'], 'S', {
...     'S': [['A', 'a'], ['B']],
...     'A': [['a'], []],
...     'B': [['b'], ['']]})
>>> sorted(compute_epsilon(g))
['A', 'B', 'S']
"""

def compute_epsilon(grammar):
    """Returns the frozenset of nullable non-terminals of the grammar."""
    nullable = set()

    # The set only grows and is bounded by the number of non-terminals,
    # so the loop stops once a full pass adds nothing.
    done = False
    while not done:
        done = True
        for rule in grammar:
            if rule.left in nullable:
                continue
            if all(symbol in nullable for symbol in rule.right):
                nullable.add(rule.left)
                done = False

    return frozenset(nullable)
