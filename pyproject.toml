[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pformat"
version = "0.1.0"
description = "printf-style formatting with its own flag, width, precision and length rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "sprintf", "format", "string formatting", "base conversion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["pformat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
