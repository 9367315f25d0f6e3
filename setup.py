"""
setup.py

Установка:
    pip install -e .            # пакеты core, solvers, solutions, peg_io, utils
    pip install -e .[test]      # + pytest

Запуск:
    tri-peg -p 3
    python main.py -p 3
"""

from setuptools import setup, find_packages

setup(
    name="tri_peg",
    version="1.0.0",
    description="Triangle Peg Solitaire: exhaustive solution enumerator",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "tri-peg=main:main",
        ],
    },
    zip_safe=False,
)
