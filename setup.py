"""
Setup script for the holdem-agent package.

Installs the ``holdem_agent`` package from ``src/`` and the
``holdem-agent`` console command.
"""

from setuptools import setup, find_packages

setup(
    name="holdem-agent",
    version="1.0.0",
    description="Hold'em Agent - a Texas Hold'em client that acts exactly once per turn",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
        "requests>=2.31.0",
        "websocket-client>=1.6.0",
    ],
    extras_require={
        "llm": ["anthropic>=0.18.0"],
        "test": ["pytest>=7.4"],
        "all": ["anthropic>=0.18.0"],
    },
    entry_points={
        "console_scripts": [
            "holdem-agent=holdem_agent.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
