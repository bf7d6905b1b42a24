import os

from setuptools import find_packages, setup

setup(
    name="forma",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
            "hypothesis>=6.100.0",
        ],
    },
    author="Forma Contributors",
    description="Applicative validation of JSON-encoded forms with per-field error collection",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
