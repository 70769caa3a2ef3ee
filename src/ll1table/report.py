"""
Formats the results of an analysis as text.

    >>> from ll1table.grammar import Grammar
    >>> from ll1table.analysis import Analysis
    >>> a = Analysis(Grammar(['a', 'b'], ['S', 'A'], 'S', {
    ...     'S': [['A', 'a'], ['b']],
    ...     'A': [['a']]}))
    >>> print(format_sets(a))
    nullable: (none)
    FIRST(S') = {a, b}
    FIRST(S) = {a, b}
    FIRST(A) = {a}
    FOLLOW(S') = {$}
    FOLLOW(S) = {$}
    FOLLOW(A) = {a}
    >>> print(format_table(a.table()))
    S', a: "S'" = 'S', '$';
    S', b: "S'" = 'S', '$';
    S, a: 'S' = 'A', 'a';
    S, b: 'S' = 'b';
    A, a: 'A' = 'a';
"""

from jinja2 import Template

sets_templ = Template(r"""
{%- if epsilon %}
nullable: {{ epsilon|join(', ') }}
{%- else %}
nullable: (none)
{%- endif %}
{%- for nonterm in nonterms %}
FIRST({{ nonterm }}) = { {{- first[nonterm]|join(', ') -}} }
{%- endfor %}
{%- for nonterm in nonterms %}
FOLLOW({{ nonterm }}) = { {{- follow[nonterm]|join(', ') -}} }
{%- endfor %}
""")

table_templ = Template(r"""
{%- for nonterm, terminal, production in cells %}
{{ nonterm }}, {{ terminal }}: {{ production }}
{%- endfor %}
{%- if conflicts %}

conflicts:
{%- for conflict in conflicts %}
{{ conflict.format() }}
{%- endfor %}
{%- endif %}
""")

def _nonterm_order(grammar):
    """Lists the non-terminals in the order in which their productions were registered."""
    order = []
    for rule in grammar:
        if rule.left not in order:
            order.append(rule.left)
    order.extend(sorted(grammar.nonterms() - frozenset(order)))
    return order

def format_sets(analysis):
    grammar = analysis.grammar
    nonterms = _nonterm_order(grammar)
    first = analysis.first()
    follow = analysis.follow()
    return sets_templ.render(
        epsilon=[nonterm for nonterm in nonterms if nonterm in analysis.epsilon()],
        nonterms=nonterms,
        first=dict((nonterm, sorted(first[nonterm])) for nonterm in nonterms),
        follow=dict((nonterm, sorted(follow[nonterm])) for nonterm in nonterms),
        ).strip('\n')

def format_table(table):
    cells = []
    for nonterm in _nonterm_order(table.grammar):
        row = table[nonterm]
        for terminal in sorted(row):
            cells.append((nonterm, terminal, row[terminal]))
    return table_templ.render(cells=cells, conflicts=table.conflicts).strip('\n')

def format_report(analysis):
    return '%s\n\n%s' % (format_sets(analysis), format_table(analysis.table()))
