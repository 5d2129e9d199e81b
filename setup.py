from setuptools import setup, find_packages

setup(
    name="media-scraper",
    version="0.1",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "fuzzywuzzy",
        "python-Levenshtein",
        "pyyaml"
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio"
        ]
    },
    entry_points={
        "console_scripts": [
            "media-scraper=media_scraper.cli:main"
        ]
    },
    python_requires=">=3.10",
)
