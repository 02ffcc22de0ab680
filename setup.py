# setup.py
from setuptools import setup, find_packages

setup(
    name="calc",
    version="0.1.0",
    description="Tree-walking evaluator for an S-expression calculator language",
    packages=find_packages(include=["calc", "calc.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["calc=calc.__main__:main"],
    },
    zip_safe=False,
)
