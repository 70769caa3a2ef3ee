import io
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr

from ll1table.__main__ import _main
from ll1table.analysis import Analysis
from ll1table.report import format_sets, format_table, format_report
from ll1table.tests.grammars import expr_grammar, conflict_grammar

EXPR_YAML = """\
terminals: ['+', '*', a, b]
nonterminals: [E, "E'", T, "T'", F]
start: E
productions:
  E:  ["T E'"]
  E': ["+ T E'", []]
  T:  ["F T'"]
  T': ["* F T'", []]
  F:  [a, b]
"""

CONFLICT_YAML = """\
terminals: [a, b]
nonterminals: [S]
start: S
productions:
  S: [a, a b]
"""

class TestReport(unittest.TestCase):
    def test_sets(self):
        text = format_sets(Analysis(expr_grammar()))
        lines = text.split('\n')
        self.assertEqual(lines[0], "nullable: E', T'")
        self.assertIn("FIRST(E) = {a, b}", lines)
        self.assertIn("FOLLOW(T) = {$, +}", lines)
        self.assertIn("FOLLOW(F) = {$, *, +}", lines)
        self.assertIn("FOLLOW(E'') = {$}", lines)

    def test_table(self):
        text = format_table(Analysis(expr_grammar()).table())
        lines = text.split('\n')
        self.assertIn("E', $: \"E'\" = ;", lines)
        self.assertIn("T', +: \"T'\" = ;", lines)
        self.assertIn("F, b: 'F' = 'b';", lines)
        self.assertNotIn('conflicts:', lines)

    def test_table_with_conflicts(self):
        text = format_table(Analysis(conflict_grammar()).table())
        self.assertTrue(text.endswith('\n'.join([
            '',
            'conflicts:',
            "'S', 'a':",
            "    'S' = 'a';",
            "    'S' = 'a', 'b';",
            "    'S' = 'B';"])))
        self.assertIn("S, a: 'S' = 'a';", text.split('\n'))

    def test_report(self):
        a = Analysis(expr_grammar())
        self.assertEqual(format_report(a), format_sets(a) + '\n\n' + format_table(a.table()))

class TestMain(unittest.TestCase):
    def setUp(self):
        self.dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.dir)

    def _write(self, name, text):
        path = os.path.join(self.dir, name)
        with open(path, 'wb') as fout:
            fout.write(text.encode('utf-8') if isinstance(text, str) else text)
        return path

    def _run(self, *args):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            res = _main(list(args))
        return res, out.getvalue(), err.getvalue()

    def test_default_prints_sets_and_table(self):
        path = self._write('expr.yaml', EXPR_YAML)
        res, out, err = self._run(path)
        self.assertEqual(res, 0)
        self.assertEqual(err, '')
        self.assertEqual(out, format_report(Analysis(expr_grammar())) + '\n')

    def test_sections(self):
        path = self._write('expr.yaml', EXPR_YAML)
        res, out, _ = self._run('--sets', path)
        self.assertEqual(res, 0)
        self.assertIn('FIRST(E)', out)
        self.assertNotIn("F, a:", out)

        res, out, _ = self._run('--table', path)
        self.assertEqual(res, 0)
        self.assertNotIn('FIRST(E)', out)
        self.assertIn("F, a: 'F' = 'a';", out)

    def test_output_file(self):
        path = self._write('expr.yaml', EXPR_YAML)
        output = os.path.join(self.dir, 'report.txt')
        res, out, _ = self._run('-o', output, path)
        self.assertEqual(res, 0)
        self.assertEqual(out, '')
        with open(output) as fin:
            self.assertIn('FOLLOW(F) = {$, *, +}', fin.read())

    def test_output_requires_single_file(self):
        path = self._write('expr.yaml', EXPR_YAML)
        res, _, err = self._run('-o', os.path.join(self.dir, 'x'), path, path)
        self.assertEqual(res, 1)
        self.assertIn('only one grammar file', err)

    def test_conflicts(self):
        path = self._write('conflict.yaml', CONFLICT_YAML)
        res, out, err = self._run(path)
        self.assertEqual(res, 0)
        self.assertIn('conflicts:', out)

        res, out, err = self._run('--strict', path)
        self.assertEqual(res, 1)
        self.assertIn('1 LL(1) conflict(s)', err)
        self.assertIn("    'S' = 'a', 'b';", err)

    def test_invalid_grammar(self):
        path = self._write('bad.yaml', CONFLICT_YAML.replace('a b', 'a c'))
        res, out, err = self._run(path)
        self.assertEqual(res, 1)
        self.assertEqual(out, '')
        self.assertIn("undefined symbol 'c'", err)
        self.assertTrue(err.startswith(path))

    def test_format_error(self):
        path = self._write('bad.yaml', 'terminals: []\n')
        res, _, err = self._run(path)
        self.assertEqual(res, 1)
        self.assertEqual(err.count(path), 1)
        self.assertIn('missing key(s)', err)

    def test_missing_file(self):
        res, _, err = self._run(os.path.join(self.dir, 'missing.yaml'))
        self.assertEqual(res, 1)
        self.assertIn('error:', err)

    def test_not_utf8_file(self):
        path = self._write('latin1.yaml', b'terminals: [\xff\xfe]\n')
        res, out, err = self._run(path)
        self.assertEqual(res, 1)
        self.assertEqual(out, '')
        self.assertTrue(err.startswith('error: ' + path + ': not a UTF-8 encoded file'))

    def test_numeric_terminals(self):
        path = self._write('binary.yaml', 'terminals: [0, 1]\nnonterminals: [S]\nstart: S\nproductions:\n  S: [0 S, 1]\n')
        res, out, err = self._run('--strict', path)
        self.assertEqual(res, 0)
        self.assertIn("S, 0: 'S' = '0', 'S';", out.split('\n'))

if __name__ == '__main__':
    unittest.main()
