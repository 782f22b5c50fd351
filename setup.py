from setuptools import setup

setup(
    name="py_buffered_io",
    version="0.1.0",
    packages=["py_buffered_io"],
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest"],
    },
)
