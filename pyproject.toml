[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spix"
version = "0.1.0"
description = "Command queue and UI interaction commands for driving application scenes in automated UI tests"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui-testing", "automation", "gui", "commands", "testing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
