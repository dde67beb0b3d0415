# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

with open("README.md", "r") as fh:
    long_description = fh.read()


requirements = ["lief>=0.14.0"]


setup(
    name='clear2mangled',
    # note to self: always change this in config as well.
    version='1.2.0',
    description='Find the mangled export of a PE file by its clear C++ declaration, virtual address or rva.',
    long_description_content_type="text/markdown",
    long_description=long_description,
    packages=find_packages(exclude=('tests', 'docs')),
    py_modules=['c2m'],
    install_requires=requirements,
    extras_require={
        # in-process demangling instead of running undname.exe
        'pdb': ['pdbparse'],
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['c2m=c2m:main'],
    },
    python_requires='>=3.7',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Security",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
