"""
setup.py for the modlocale package.

Usage:
    pip install -e .[test]
    python -m modlocale check
"""
from setuptools import find_packages, setup

about = {}
with open("modlocale/__version__.py", encoding="utf-8") as f:
    exec(f.read(), about)

setup(
    name="modlocale",
    version=about["__version__"],
    description="Mod translation overrides for a host localization store",
    packages=find_packages(include=["modlocale", "modlocale.*"], exclude=["modlocale.tests"]),
    python_requires=">=3.10",
    install_requires=[
        "PyYAML>=6.0",
        "pydantic>=2.0",
        "pygame>=2.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["modlocale=modlocale.cli:main"],
    },
)
