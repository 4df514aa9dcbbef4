from setuptools import setup, find_packages

setup(
    name="table_builder",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="A builder for simple HTML tables.",
    install_requires=[],
    extras_require={
        "test": ["pytest", "mypy"],
        "docs": ["sphinx", "numpydoc"],
    },
)
