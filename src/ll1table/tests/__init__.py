def load_tests(loader, tests, ignore):
    import doctest

    import ll1table.analysis
    import ll1table.epsilon
    import ll1table.first
    import ll1table.follow
    import ll1table.grammar
    import ll1table.ll1table
    import ll1table.loader
    import ll1table.production
    import ll1table.report

    tests.addTests(doctest.DocTestSuite(ll1table.analysis))
    tests.addTests(doctest.DocTestSuite(ll1table.epsilon))
    tests.addTests(doctest.DocTestSuite(ll1table.first))
    tests.addTests(doctest.DocTestSuite(ll1table.follow))
    tests.addTests(doctest.DocTestSuite(ll1table.grammar))
    tests.addTests(doctest.DocTestSuite(ll1table.ll1table))
    tests.addTests(doctest.DocTestSuite(ll1table.loader))
    tests.addTests(doctest.DocTestSuite(ll1table.production))
    tests.addTests(doctest.DocTestSuite(ll1table.report))

    from . import test_grammar, test_sets, test_table, test_loader, test_main

    for module in (test_grammar, test_sets, test_table, test_loader, test_main):
        tests.addTests(loader.loadTestsFromModule(module))

    return tests

if __name__ == '__main__':
    import unittest
    unittest.main()
