#!/usr/bin/env python
"""
A setuptools-based setup module.

See:
   https://packaging.python.org/en/latest/distributing.html
   https://github.com/pypa/sampleproject

Docs on the setup function kwargs:
   https://packaging.python.org/distributing/#setup-args

"""

import os.path
from setuptools import setup, find_packages

# Get the long description from the README.rst file.
current_dir = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(current_dir, "README.rst"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="shunting",
    version="0.1.0", # Versions should comply with PEP440.
    description="A customizable shunting-yard parser for infix expressions.",
    keywords=["parser", "shunting-yard", "expression", "postfix",
              "reverse Polish notation", "syntax tree", "operator precedence"],
    install_requires=["numpy"],
    extras_require={
        "test": ["pytest>=2.0", "pytest-helper"],
    },
    python_requires=">=3.8",

    license="MIT",
    classifiers=[
        # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
        # Development Status: Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        "Development Status :: 3 - Alpha",
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Compilers',
        'Topic :: Utilities',
    ],

    # Settings usually the same.
    include_package_data=True,
    zip_safe=False,

    # Automated stuff below.
    long_description=long_description,
    packages=find_packages('src'),
    package_dir={'': 'src'},
)

