# setup.py
from setuptools import setup, find_packages

setup(
    name="schemer",
    version="0.1.0",
    description="A small metacircular evaluator for pre-structured S-expressions",
    packages=find_packages(include=["schemer", "schemer.*"]),
    python_requires=">=3.10",
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
