[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "h2m"
version = "1.0.0"
description = "Command-line converter between Markdown and HTML files"
requires-python = ">=3.10"
dependencies = [
    "markdown-it-py",
]
keywords = ["markdown", "html", "converter", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
h2m = "h2m.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["h2m"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
