# setup.py

from setuptools import setup, find_packages

setup(
    name="robot_tour",
    version="0.1.0",
    description="Nearest-neighbor and exhaustive tours for robot points on a circular board",
    packages=find_packages(exclude=["tests*", "benchmarks*", "examples*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
)
