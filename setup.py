"""
Setup script for the Carbon Credit Market
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="carbon-credit-market",
    version="1.0.0",
    description="A persistent marketplace for renewable-energy carbon credits",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["credit_market.tests", "credit_market.tests.*"]),
    package_data={"credit_market": ["static/descriptions/*.md"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Office/Business :: Financial",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.4",
            "httpx>=0.25",
        ],
    },
    entry_points={
        "console_scripts": [
            "credit-market-api=credit_market.main:main",
        ],
    },
)
