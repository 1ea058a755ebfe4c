"""Setup script for the Jupiter swap client."""

import os
from setuptools import setup, find_packages

# Get description from README
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Get version from package
about = {}
with open(os.path.join("jupiter_swap", "__version__.py"), "r", encoding="utf-8") as f:
    exec(f.read(), about)

# Get dependencies from requirements.txt
with open("requirements.txt", "r", encoding="utf-8") as f:
    requirements = [line.strip() for line in f.readlines() if line.strip() and not line.startswith("#")]

setup(
    name="jupiter-swap-client",
    version=about["__version__"],
    description="Async client for Jupiter swap quotes, swap transactions and the Jupiter token list",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author=about["__author__"],
    author_email=about["__email__"],
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Framework :: AsyncIO",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Office/Business :: Financial",
    ],
    python_requires=">=3.10",
)
