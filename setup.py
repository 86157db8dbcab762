#!/usr/bin/env python3
"""
Setup script for Match2Metrics.
"""

from pathlib import Path

from setuptools import find_packages, setup


def read_requirements():
    """Read runtime requirements."""
    requirements = Path(__file__).parent / "requirements.txt"
    return [
        line.strip() for line in requirements.read_text().splitlines()
        if line.strip() and not line.startswith("#")
    ]


setup(
    name="match2metrics",
    version="0.1.0",
    description="Per-model speed, rating and efficiency analytics for engine-vs-engine match runs",
    packages=find_packages(include=["match2metrics", "match2metrics.*"]),
    python_requires=">=3.8",
    install_requires=read_requirements(),
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "match2metrics=match2metrics.cli:main",
        ],
    },
)
