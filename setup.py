"""Setup script for the termclock package."""

from setuptools import find_packages, setup

setup(
    name="termclock",
    version="0.1.0",
    description="Terminal clock dashboard with thermometer gauge and todo list",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pyyaml",
        "python-dotenv",
        "pymysql",
        "aiohttp",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
        "dev": [
            "pytest",
            "black",
            "isort",
            "mypy",
        ],
    },
    entry_points={
        "console_scripts": [
            "termclock=termclock.display:main",
        ],
    },
)
