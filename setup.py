# setup.py
from setuptools import setup, find_packages

setup(
    name="slang",
    version="0.1.0",
    description="Extension builtins (case, map/filter/reduce, threading, doseq, set!, reflection) for a Lisp-like expression language",
    packages=find_packages(include=["slang", "slang.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
