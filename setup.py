# setup.py - Package install
from setuptools import setup, find_packages

setup(
    name="sparse_linear_algebra",
    version="0.1.0",
    description="Typed, thread-shareable operator layer over GraphBLAS",
    packages=find_packages(include=["sparse_linear_algebra", "sparse_linear_algebra.*"]),
    python_requires=">=3.9",
    install_requires=[
        "python-graphblas[default]",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
