#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup
setup(name='ll1table',
    version='0.1',
    description='FIRST/FOLLOW set and LL(1) parsing table generator for context-free grammars',
    install_requires=['Jinja2>=2.7.0', 'PyYAML>=5.1'],
    packages=['ll1table', 'll1table.tests'],
    package_dir={'': 'src'},
    python_requires='>=3.5',
    entry_points = {
        'console_scripts': [
            'll1table = ll1table.__main__:_main',
            ],
        },
    test_suite = "ll1table.tests",
    classifiers=[
        # Supported python versions
        'Programming Language :: Python :: 3',

        # Topics
        'Topic :: Software Development :: Compilers',
    ]
    )
