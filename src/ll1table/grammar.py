import warnings
from .production import Production, EPSILON, END_OF_INPUT

class InvalidGrammarError(Exception):
    """Raised during the construction of a grammar, if its description is inconsistent."""

class UndefinedSymbolError(InvalidGrammarError):
    """Raised if a production refers to a symbol that was never declared."""
    def __init__(self, symbol, production):
        InvalidGrammarError.__init__(self, 'undefined symbol %r in production %s' % (symbol, production))
        self.symbol = symbol
        self.production = production

class AugmentationCollisionError(InvalidGrammarError):
    """Raised if the name chosen for the augmented start symbol is already taken."""
    def __init__(self, name):
        InvalidGrammarError.__init__(self, 'augmented start symbol %r collides with an existing symbol' % (name,))
        self.name = name

class GrammarWarning(UserWarning):
    """Issued for grammar defects that don't prevent the analysis."""

class Grammar:
    """Represents a context-free grammar prepared for LL(1) analysis.

    The grammar is built from a set of terminals, a set of non-terminals,
    a start symbol and a mapping from non-terminals to lists of right sides.

    >>> g = Grammar(
    ...     terminals=['a', 'b'],
    ...     nonterms=['S', 'A'],
    ...     start='S',
    ...     productions={'S': [['A', 'a'], ['b']], 'A': [['a']]})
    >>> print(g)
    "S'" = 'S', '$';
    'S' = 'A', 'a';
    'S' = 'b';
    'A' = 'a';

    The grammar is augmented during construction. A fresh start symbol
    is added together with a production deriving the original start symbol
    followed by the end-of-input terminal, which is added to the terminals.

    >>> g.start(), g.augmented_start()
    ('S', "S'")
    >>> sorted(g.terminals())
    ['$', 'a', 'b']
    >>> sorted(g.nonterms())
    ['A', 'S', "S'"]

    Grammars expose their productions using the standard sequence interface,
    the augmented production always comes first.

    >>> g[0]
    Production("S'", ('S', '$'))
    >>> len(g)
    4
    >>> for p in g.rules('S'): print(p)
    'S' = 'A', 'a';
    'S' = 'b';
    >>> g.rules('a')
    ()

    Inconsistent descriptions are rejected before anything else happens.

    >>> Grammar(['a'], ['S'], 'S', {'S': [['a', 'b']]})
    Traceback (most recent call last):
        ...
    ll1table.grammar.UndefinedSymbolError: undefined symbol 'b' in production 'S' = 'a', 'b';

    Once constructed, the grammar cannot be modified.
    """

    def __init__(self, terminals, nonterms, start, productions, augmented_start=None, filename=None):
        terminals = frozenset(terminals)
        nonterms = frozenset(nonterms)

        overlap = terminals & nonterms
        if overlap:
            raise InvalidGrammarError('symbols declared both terminal and non-terminal: %s'
                % ', '.join(sorted(repr(sym) for sym in overlap)))
        if EPSILON in terminals or EPSILON in nonterms:
            raise InvalidGrammarError('the empty marker cannot be declared as a symbol')
        if END_OF_INPUT in nonterms:
            raise InvalidGrammarError('the end-of-input marker %r cannot be a non-terminal' % END_OF_INPUT)
        if start not in nonterms:
            raise InvalidGrammarError('the start symbol %r is not a declared non-terminal' % (start,))

        rules = []
        for left, rights in productions.items():
            if left not in nonterms:
                raise InvalidGrammarError('productions given for %r, which is not a declared non-terminal' % (left,))
            for right in rights:
                if isinstance(right, str):
                    raise InvalidGrammarError('the right side of a production for %r must be a sequence of symbols, not %r' % (left, right))
                production = Production(left, right)
                for symbol in production.right:
                    if symbol not in terminals and symbol not in nonterms and symbol != END_OF_INPUT:
                        raise UndefinedSymbolError(symbol, production)
                rules.append(production)

        symbols = terminals | nonterms | frozenset([END_OF_INPUT])
        if augmented_start is None:
            augmented_start = start + "'"
            while augmented_start in symbols:
                augmented_start += "'"
        elif augmented_start in symbols or augmented_start == EPSILON:
            raise AugmentationCollisionError(augmented_start)

        self.filename = filename
        self._start = start
        self._augmented_start = augmented_start
        self._terminals = terminals | frozenset([END_OF_INPUT])
        self._nonterms = nonterms | frozenset([augmented_start])
        self._rules = (Production(augmented_start, (start, END_OF_INPUT)),) + tuple(rules)

        rule_cache = {}
        for rule in self._rules:
            rule_cache.setdefault(rule.left, []).append(rule)
        self._rule_cache = dict((left, tuple(rs)) for left, rs in rule_cache.items())

        prefix = '%s: ' % filename if filename else ''
        for nonterm in sorted(self.undefined_nonterms()):
            warnings.warn('%snon-terminal %r has no productions' % (prefix, nonterm), GrammarWarning, stacklevel=2)
        for nonterm in sorted(self.unreachable_nonterms()):
            warnings.warn('%snon-terminal %r is unreachable from %r' % (prefix, nonterm, start), GrammarWarning, stacklevel=2)

    def __getitem__(self, index):
        return self._rules[index]

    def __len__(self):
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __str__(self):
        return '\n'.join(str(rule) for rule in self._rules)

    def __repr__(self):
        return 'Grammar(%s)' % ', '.join(repr(rule) for rule in self._rules)

    def rules(self, left):
        """Retrieves the productions with a given non-terminal on the left, in registration order."""
        return self._rule_cache.get(left, ())

    def is_terminal(self, symbol):
        return symbol in self._terminals

    def is_nonterm(self, symbol):
        return symbol in self._nonterms

    def terminals(self):
        """Returns the set of terminals, including the end-of-input marker."""
        return self._terminals

    def nonterms(self):
        """Returns the set of non-terminals, including the augmented start symbol."""
        return self._nonterms

    def symbols(self):
        return self._terminals | self._nonterms

    def start(self):
        return self._start

    def augmented_start(self):
        return self._augmented_start

    def augmented_production(self):
        return self._rules[0]

    def undefined_nonterms(self):
        """Returns the declared non-terminals that have no productions.

        >>> import warnings
        >>> with warnings.catch_warnings():
        ...     warnings.simplefilter('ignore')
        ...     g = Grammar(['a'], ['S', 'A'], 'S', {'S': [['a'], ['A']]})
        >>> sorted(g.undefined_nonterms())
        ['A']
        """
        return frozenset(nonterm for nonterm in self._nonterms if nonterm not in self._rule_cache)

    def unreachable_nonterms(self):
        """Returns the non-terminals that cannot be reached from the start symbol.

        >>> import warnings
        >>> with warnings.catch_warnings():
        ...     warnings.simplefilter('ignore')
        ...     g = Grammar(['a'], ['S', 'A'], 'S', {'S': [['a']], 'A': [['S']]})
        >>> sorted(g.unreachable_nonterms())
        ['A']
        """
        reached = set([self._augmented_start])
        stack = [self._augmented_start]
        while stack:
            for rule in self.rules(stack.pop()):
                for symbol in rule.right:
                    if symbol in self._nonterms and symbol not in reached:
                        reached.add(symbol)
                        stack.append(symbol)
        return self._nonterms - reached
