"""
Setup script for the aWattar Python client.

Notes
-----
- Reads long description and requirements from adjacent files for clarity.
- Declares optional extras for tests, development and examples.
- Packages typed hints via ``py.typed``.
"""
import re

from setuptools import setup, find_packages

# Version lives in the package so the User-Agent header cannot drift from it
with open("awattar_api/_version.py", "r", encoding="utf-8") as fh:
    version = re.search(r"__version__ = \"([^\"]+)\"", fh.read()).group(1)

# Long description for PyPI project page
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Base runtime requirements
with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

test_requirements = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
    "pytest-cov>=4.0",
]

setup(
    name="awattar-api",
    version=version,
    description="Client for the aWattar day-ahead electricity market price API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Internet :: WWW/HTTP",
    ],
    keywords=[
        "energy", "electricity", "awattar", "day-ahead", "prices", "api",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": test_requirements,
        "dev": test_requirements + [
            "black>=23.0",
            "mypy>=1.0",
        ],
    },
    package_data={
        # Include typing marker for PEP 561
        "awattar_api": ["py.typed"],
    },
    include_package_data=True,
    zip_safe=False,
)
