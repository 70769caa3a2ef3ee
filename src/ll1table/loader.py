"""
Loads grammar descriptions from YAML documents.

The document is a mapping with four keys.

    terminals: [a, b]
    nonterminals: [S, A]
    start: S
    productions:
      S:
        - [A, a]
        - [b]
      A:
        - [a]
        - []

A right side may also be given as a single string of whitespace-separated
symbols. An empty list, an empty string or null denotes an epsilon production.

    >>> g = grammar_from_dict({
    ...     'terminals': ['a', 'b'],
    ...     'nonterminals': ['S', 'A'],
    ...     'start': 'S',
    ...     'productions': {'S': ['A a', ['b']], 'A': [['a'], None]}})
    >>> print(g)
    "S'" = 'S', '$';
    'S' = 'A', 'a';
    'S' = 'b';
    'A' = 'a';
    'A' = ;

Symbol names are kept as written, even those that look like numbers.

    >>> g = parse_grammar('''
    ... terminals: [0, 1]
    ... nonterminals: [S]
    ... start: S
    ... productions:
    ...   S: [[0, S], [1]]
    ... ''')
    >>> for p in g.rules('S'): print(p)
    'S' = '0', 'S';
    'S' = '1';

A mapping may not repeat a key.

    >>> parse_grammar('''
    ... terminals: [a]
    ... nonterminals: [S]
    ... start: S
    ... productions:
    ...   S: [[a]]
    ...   S: [[a, a]]
    ... ''')
    Traceback (most recent call last):
        ...
    ll1table.loader.GrammarFormatError: duplicate key 'S'
"""

from collections.abc import Hashable
import yaml
from .grammar import Grammar, InvalidGrammarError

class GrammarFormatError(InvalidGrammarError):
    """Raised if a grammar document doesn't have the expected shape."""
    def __init__(self, message, filename=None):
        if filename is not None:
            message = '%s: %s' % (filename, message)
        InvalidGrammarError.__init__(self, message)
        self.filename = filename

_NAME_TAGS = ('tag:yaml.org,2002:bool', 'tag:yaml.org,2002:int', 'tag:yaml.org,2002:float')

class _DuplicateKeyError(yaml.constructor.ConstructorError):
    def __init__(self, key, node, key_node):
        yaml.constructor.ConstructorError.__init__(self, 'while constructing a mapping', node.start_mark,
            'found duplicate key %r' % (key,), key_node.start_mark)
        self.key = key

class _GrammarLoader(yaml.SafeLoader):
    """A safe YAML loader that rejects mappings with repeated keys."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            self.flatten_mapping(node)
            keys = set()
            for key_node, value_node in node.value:
                key = self.construct_object(key_node, deep=deep)
                if not isinstance(key, Hashable):
                    continue
                if key in keys:
                    raise _DuplicateKeyError(key, node, key_node)
                keys.add(key)
        return yaml.SafeLoader.construct_mapping(self, node, deep=deep)

# Symbol names such as 0, 1.5 or on stay strings, as they are written.
_GrammarLoader.yaml_implicit_resolvers = dict(
    (first, [(tag, regexp) for tag, regexp in resolvers if tag not in _NAME_TAGS])
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items())

def _name(value):
    return value if isinstance(value, str) else None

def _symbol_list(value, what, filename):
    if not isinstance(value, list):
        raise GrammarFormatError('%s must be a list of symbol names' % what, filename)
    names = [_name(sym) for sym in value]
    if None in names:
        raise GrammarFormatError('%s must be a list of symbol names' % what, filename)
    return names

def _right_side(value, left, filename):
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    if isinstance(value, list):
        names = tuple(_name(sym) for sym in value)
        if None in names:
            raise GrammarFormatError('symbols in productions for %r must be names' % (left,), filename)
        return names
    raise GrammarFormatError('invalid production for %r: %r' % (left, value), filename)

def grammar_from_dict(data, filename=None, augmented_start=None):
    """Constructs a `Grammar` from a decoded grammar document."""
    if not isinstance(data, dict):
        raise GrammarFormatError('the grammar must be a mapping', filename)

    missing = [key for key in ('terminals', 'nonterminals', 'start', 'productions') if key not in data]
    if missing:
        raise GrammarFormatError('missing key(s): %s' % ', '.join(missing), filename)

    terminals = _symbol_list(data['terminals'], 'terminals', filename)
    nonterms = _symbol_list(data['nonterminals'], 'nonterminals', filename)

    start = _name(data['start'])
    if start is None:
        raise GrammarFormatError('start must be a symbol name', filename)

    productions = data['productions']
    if not isinstance(productions, dict):
        raise GrammarFormatError('productions must be a mapping', filename)

    rules = {}
    for left, rights in productions.items():
        name = _name(left)
        if name is None:
            raise GrammarFormatError('invalid non-terminal %r' % (left,), filename)
        if rights is None:
            rights = []
        if not isinstance(rights, list):
            raise GrammarFormatError('productions for %r must be a list' % (name,), filename)
        rules[name] = [_right_side(right, name, filename) for right in rights]

    return Grammar(terminals, nonterms, start, rules, augmented_start=augmented_start, filename=filename)

def parse_grammar(text, filename=None, augmented_start=None):
    """Constructs a grammar from YAML text (a string or UTF-8 encoded bytes)."""
    try:
        data = yaml.load(text, Loader=_GrammarLoader)
    except _DuplicateKeyError as e:
        raise GrammarFormatError('duplicate key %r' % (e.key,), filename)
    except yaml.YAMLError as e:
        raise GrammarFormatError('invalid YAML: %s' % e, filename)

    return grammar_from_dict(data, filename=filename, augmented_start=augmented_start)

def load_grammar(filename_or_stream, augmented_start=None):
    """Loads a grammar from a UTF-8 encoded YAML file, given by its name or as an open stream."""
    try:
        if hasattr(filename_or_stream, 'read'):
            filename = getattr(filename_or_stream, 'name', None)
            text = filename_or_stream.read()
        else:
            filename = filename_or_stream
            with open(filename, 'r', encoding='utf-8') as fin:
                text = fin.read()
    except UnicodeDecodeError as e:
        raise GrammarFormatError('not a UTF-8 encoded file: %s' % e, filename)

    return parse_grammar(text, filename=filename, augmented_start=augmented_start)
