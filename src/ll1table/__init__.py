from .production import Production, EPSILON, END_OF_INPUT
from .grammar import Grammar, InvalidGrammarError, UndefinedSymbolError, AugmentationCollisionError, GrammarWarning
from .epsilon import compute_epsilon
from .first import First, compute_first
from .follow import Follow, compute_follow
from .ll1table import ParseTable, Conflict, LL1ConflictError, build_table
from .analysis import Analysis
from .loader import load_grammar, parse_grammar, grammar_from_dict, GrammarFormatError
