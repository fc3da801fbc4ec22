# setup.py
from setuptools import setup, find_packages

setup(
    name="taxatree",
    version="1.0.0",
    description="Interactive in-memory catalog of Class > Order > Family > Genus > Species paths",
    author="Taxatree Contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": [
            "taxatree=taxatree.cli:main",
        ],
    },
    install_requires=[
        "pandas>=1.1",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
