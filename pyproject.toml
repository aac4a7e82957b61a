[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodrills"
version = "0.1.0"
description = "Classic algorithm exercises on linked lists, arrays, strings, matrices and bits."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "linked-list", "bit-manipulation", "arrays", "strings", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algodrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
