from setuptools import setup, find_packages

setup(
    name="checkers-rules",
    version="1.0.0",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "checkers=checkers.__main__:main",
        ],
    },
    author="Checkers Rules Team",
    description="Rules engine for 8x8 draughts: moves, mandatory captures, multi-jumps and promotion",
)
