#!/usr/bin/env python3

"""Setup script for the continuous shape measure package."""

from setuptools import setup, find_packages

setup(
    name="coordshape",
    version="0.1.0",
    description="Continuous shape measures for coordination polyhedra",
    author="Adam",
    author_email="adam@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.20.0",
        "scipy>=1.6.0",
        "pandas>=1.3.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "test": ["pytest>=6.0"],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "coordshape-measure=coordshape.presentation.cli.measure_shapes:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
