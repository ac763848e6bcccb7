# setup.py
from setuptools import setup, find_packages

setup(
    name="mceval",
    version="0.1.0",
    description="A metacircular evaluator for a small Scheme-like language",
    packages=find_packages(include=["mceval", "mceval.*"]),
    python_requires=">=3.10",
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
