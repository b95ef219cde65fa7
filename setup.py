# setup.py
from setuptools import setup, find_packages

setup(
    name="evector",
    version="1.0.0",
    description="N-dimensional Euclidean vector with a cached norm",
    packages=find_packages(include=["evector", "evector.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
