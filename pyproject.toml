[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ilias_scraper"
version = "2.3.0"
description = "A command-line tool to scrape course material from Ilias and keep a local copy in sync."
requires-python = ">=3.10"
keywords = ["ilias", "scraper", "e-learning", "sync", "download"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "httpx",
    "beautifulsoup4",
    "termcolor",
    "platformdirs",
    "tqdm",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ilias = "ilias_scraper.cli.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ilias_scraper"]

[tool.pytest.ini_options]
addopts = "-ra"
