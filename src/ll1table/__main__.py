from .loader import load_grammar
from .grammar import InvalidGrammarError
from .analysis import Analysis
from .ll1table import LL1ConflictError
from .report import format_sets, format_table
import sys

def _main(argv=None):
    from argparse import ArgumentParser
    ap = ArgumentParser(prog='ll1table', description='Computes FIRST and FOLLOW sets and the LL(1) parsing table of a grammar')
    ap.add_argument('-o', '--output', help='The file to store the report to')
    ap.add_argument('--sets', action='store_true', help='Print the nullable, FIRST and FOLLOW sets')
    ap.add_argument('--table', action='store_true', help='Print the LL(1) parsing table')
    ap.add_argument('--strict', action='store_true', help='Fail if the grammar is not LL(1)')
    ap.add_argument('filename', nargs='+')
    args = ap.parse_args(argv)

    if args.output and len(args.filename) != 1:
        print('error: only one grammar file can be passed if -o is given', file=sys.stderr)
        return 1

    show_sets = args.sets or not args.table
    show_table = args.table or not args.sets

    for fname in args.filename:
        try:
            a = Analysis(load_grammar(fname))

            sections = []
            if show_sets:
                sections.append(format_sets(a))
            if show_table:
                table = a.table()
                if args.strict:
                    table.check()
                sections.append(format_table(table))
            report = '\n\n'.join(sections) + '\n'

            if args.output:
                with open(args.output, 'w') as fout:
                    fout.write(report)
            else:
                sys.stdout.write(report)

        except OSError as e:
            print('%s: error: %s' % (fname, e), file=sys.stderr)
            return 1
        except InvalidGrammarError as e:
            if getattr(e, 'filename', None):
                print('error: %s' % e, file=sys.stderr)
            else:
                print('%s: error: %s' % (fname, e), file=sys.stderr)
            return 1
        except LL1ConflictError as e:
            print('%s: error: %s' % (fname, e), file=sys.stderr)
            e.print_conflicts()
            return 1

    return 0

if __name__ == '__main__':
    sys.exit(_main())
