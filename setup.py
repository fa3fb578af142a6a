#!/usr/bin/env python

from setuptools import setup

setup(
    name="vigenere",
    version="1.0",
    description="A Vigenère cipher with word-wrap and block-grouping output",
    packages=["vigenere"],
    python_requires=">=3.8",
    entry_points={
        "console_scripts": ["vigenere=vigenere.cli:main"],
    },
    install_requires=[
        "tomli",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
