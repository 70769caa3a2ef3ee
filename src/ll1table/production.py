EPSILON = ''
END_OF_INPUT = '$'

class Production:
    """Represents a single production of a context-free grammar.

    A production always has a single non-terminal symbol on the left
    and a tuple (possibly empty) of symbols on the right.

    >>> p = Production('E', ('T', "E'"))
    >>> print(p)
    'E' = 'T', "E'";
    >>> p.left, p.right
    ('E', ('T', "E'"))

    Terminal and non-terminal symbols are written the same way,
    the distinction only exists at the grammar level.

    A production with no symbols on the right derives the empty string.
    The empty marker may be used to spell such a production out explicitly;
    it is dropped from the right side.

    >>> print(Production('A', ()))
    'A' = ;
    >>> Production('A', ('',)) == Production('A', ())
    True
    >>> Production('A', ('',)).is_epsilon()
    True

    Productions are immutable and hashable, so they can be used
    as dictionary keys and stored in sets.

    >>> len(set([Production('A', ['a']), Production('A', ('a',))]))
    1
    """

    __slots__ = ('_left', '_right')

    def __init__(self, left, right=()):
        self._left = left
        self._right = tuple(symbol for symbol in right if symbol != EPSILON)

    @property
    def left(self):
        return self._left

    @property
    def right(self):
        return self._right

    def is_epsilon(self):
        return not self._right

    def __eq__(self, other):
        if not isinstance(other, Production):
            return NotImplemented
        return (self._left, self._right) == (other._left, other._right)

    def __hash__(self):
        return hash((self._left, self._right))

    def __str__(self):
        """
        >>> print(Production('a', ('b', 'c')))
        'a' = 'b', 'c';
        >>> print(Production('a', ()))
        'a' = ;
        """
        return ''.join((repr(self._left), ' = ', ', '.join(repr(symbol) for symbol in self._right), ';'))

    def __repr__(self):
        """
        >>> print(repr(Production('a', ('b', 'c'))))
        Production('a', ('b', 'c'))
        >>> print(repr(Production('a', ())))
        Production('a', ())
        """
        return 'Production(%r, %r)' % (self._left, self._right)
