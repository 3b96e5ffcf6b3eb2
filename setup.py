# !/usr/bin/env python

from setuptools import setup, find_packages

with open("README.md") as f:
    long_description = f.read()

setup(
    name="containerkit",
    packages=find_packages(".", exclude=["tests", "tests.*"]),
    version="0.1.0",
    description="In-memory heaps, linked lists and queues",
    python_requires=">=3.8",
    install_requires=[
        "coloredlogs",
    ],
    extras_require={
        "test": [
            "pytest",
            "numpy",
        ],
    },
    long_description=long_description,
    long_description_content_type="text/markdown",
)
