[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clist2html"
version = "1.0.0"
description = "Convert checklist definition files into printable HTML tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["checklist", "html", "converter"]
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
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clist2html = "clist2html.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clist2html"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
