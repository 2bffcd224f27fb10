from setuptools import setup, find_packages

setup(
    name="cork",
    version="0.1.0",
    description="Stopwatch with lap splits & countdown timer for the terminal",
    packages=find_packages(include=["cork", "cork.*"]),
    install_requires=[
        "typer",
        "rich",
        "readchar",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "cork=cork.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
