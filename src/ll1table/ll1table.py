"""
This module provides the `build_table` function, which creates
the LL(1) parsing table of a grammar.

    >>> from ll1table.grammar import Grammar
    >>> g1 = Grammar(['a', 'b'], ['S', 'A'], 'S', {
    ...     'S': [['A', 'a'], ['b']],
    ...     'A': [['a']]})
    >>> t1 = build_table(g1)

The table maps a non-terminal and a lookahead terminal to the production
that a predictive parser applies in that situation. Empty cells
correspond to syntax errors.

    >>> print(t1.lookup('S', 'a'))
    'S' = 'A', 'a';
    >>> print(t1.lookup('S', 'b'))
    'S' = 'b';
    >>> print(t1.lookup('A', 'b'))
    None
    >>> sorted(t1['A'])
    ['a']
    >>> t1.is_ll1()
    True

Conflicts
---------
If two productions compete for the same cell, the grammar is not LL(1).
The table is still built, the production registered first wins the cell,
and the conflict is recorded.

    >>> g2 = Grammar(['a', 'b'], ['S'], 'S', {
    ...     'S': [['a'], ['a', 'b']]})
    >>> t2 = build_table(g2)
    >>> t2.is_ll1()
    False
    >>> print(t2.lookup('S', 'a'))
    'S' = 'a';
    >>> print(t2.format_conflicts())
    'S', 'a':
        'S' = 'a';
        'S' = 'a', 'b';

Callers that can't continue with a non-LL(1) grammar use `check`.

    >>> t2.check()
    Traceback (most recent call last):
        ...
    ll1table.ll1table.LL1ConflictError: 1 LL(1) conflict(s) in the parsing table
"""

from collections import namedtuple
import sys
from .first import First
from .follow import Follow

class Conflict(namedtuple('Conflict', 'nonterm terminal productions')):
    """Two or more productions competing for a single cell of the table.

    The productions are listed in registration order, so the first one
    is the production that was kept in the table.
    """
    __slots__ = ()

    def format(self):
        lines = ['%r, %r:' % (self.nonterm, self.terminal)]
        lines.extend('    %s' % production for production in self.productions)
        return '\n'.join(lines)

def _format_conflicts(conflicts):
    return '\n'.join(conflict.format() for conflict in conflicts)

class LL1ConflictError(Exception):
    """Raised by `ParseTable.check` if the grammar turned out not to be LL(1)."""
    def __init__(self, table):
        Exception.__init__(self, '%d LL(1) conflict(s) in the parsing table' % len(table.conflicts))
        self.table = table
        self.conflicts = table.conflicts

    def format_conflicts(self):
        return _format_conflicts(self.conflicts)

    def print_conflicts(self, file=None):
        print(self.format_conflicts(), file=file or sys.stderr)

class ParseTable:
    """Represents the LL(1) parsing table of a grammar.

    The `rows` member maps every non-terminal to a dict from lookahead
    terminals to productions. The `conflicts` member lists the detected
    conflicts in the order they were found.
    """
    def __init__(self, grammar, rows, conflicts):
        self.grammar = grammar
        self.rows = rows
        self.conflicts = conflicts

    def __getitem__(self, nonterm):
        return self.rows[nonterm]

    def __eq__(self, other):
        if not isinstance(other, ParseTable):
            return NotImplemented
        return self.rows == other.rows and self.conflicts == other.conflicts

    __hash__ = None

    def lookup(self, nonterm, terminal):
        return self.rows.get(nonterm, {}).get(terminal)

    def is_ll1(self):
        return not self.conflicts

    def format_conflicts(self):
        return _format_conflicts(self.conflicts)

    def check(self):
        if self.conflicts:
            raise LL1ConflictError(self)
        return self

def build_table(grammar, first=None, follow=None):
    """Builds the LL(1) parsing table for the grammar.

    The FIRST and FOLLOW sets are computed unless they are supplied;
    `follow` must have been computed from `first` if both are given.
    """
    if first is None:
        first = follow.first if follow is not None else First(grammar)
    if follow is None:
        follow = Follow(grammar, first)

    # Every cell collects its candidates in registration order. A production
    # listed twice is registered twice and competes with itself.
    cells = dict((nonterm, {}) for nonterm in grammar.nonterms())
    for rule in grammar:
        row = cells[rule.left]

        lookaheads = set(first.of_sequence(rule.right))
        if first.is_nullable(rule.right):
            lookaheads.update(follow[rule.left])

        for terminal in sorted(lookaheads):
            row.setdefault(terminal, []).append(rule)

    rows = {}
    conflicts = []
    for rule in grammar:
        if rule.left in rows:
            continue
        row = cells[rule.left]
        rows[rule.left] = dict((terminal, candidates[0]) for terminal, candidates in row.items())
        for terminal in sorted(row):
            if len(row[terminal]) > 1:
                conflicts.append(Conflict(rule.left, terminal, tuple(row[terminal])))

    for nonterm in grammar.nonterms():
        rows.setdefault(nonterm, {})

    return ParseTable(grammar, rows, conflicts)
