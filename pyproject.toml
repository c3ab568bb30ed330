[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scrape"
version = "0.1.0"
description = "Command-line tool that scrapes article links and turns articles into Markdown"
requires-python = ">=3.10"
keywords = ["scraping", "markdown", "html", "articles", "cli"]
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
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "requests",
    "beautifulsoup4",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
scrape = "scrape.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["scrape"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
