# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="sprig",
    version="0.1.0",
    description="A small tree-walking evaluator for a Lisp-like expression language",
    packages=find_namespace_packages(include=["sprig", "sprig.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["sprig = sprig.repl:main"],
    },
    zip_safe=False,
)
