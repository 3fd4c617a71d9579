"""Setup script for the netwatch package."""

from setuptools import find_packages, setup

setup(
    name="netwatch",
    version="0.1.0",
    description="Network outage monitor with a plain-text event log",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "psutil",
        "pyyaml",
        "python-dotenv",
        "rich",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-asyncio",
            "black",
            "isort",
            "mypy",
        ],
    },
    entry_points={
        "console_scripts": [
            "netwatch=netwatch.monitor:main",
        ],
    },
)
