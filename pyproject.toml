[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moneyfold"
version = "0.1.0"
description = "Exact monetary amounts in minor units, with ISO 4217 currencies, formatting, splitting and allocation"
requires-python = ">=3.10"
dependencies = []
keywords = ["money", "currency", "iso4217", "finance", "allocation", "formatting"]
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
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["moneyfold"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
