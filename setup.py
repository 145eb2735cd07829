"""
Setup script for the fair-rps package.

Installs the ``fair_rps`` package from ``src/`` and the ``fair-rps``
console script.
"""

from setuptools import setup, find_packages

setup(
    name="fair-rps",
    version="1.0.0",
    description="Rock-paper-scissors for any odd number of moves, with an HMAC fairness proof",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
        "tabulate>=0.9.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "fair-rps=fair_rps.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Topic :: Games/Entertainment",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
