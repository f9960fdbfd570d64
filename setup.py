"""
Setup script for the board-game-scoring package.

Installs the scoring engine as a library plus the ``board-game-scoring``
command-line entry point.
"""

from setuptools import setup, find_packages

setup(
    name="board-game-scoring",
    version="1.0.0",
    description="Board game match scoring: final scores, placements, winners and tie detection",
    author="Board Games Tracker Team",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "board-game-scoring=board_game_scoring.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
