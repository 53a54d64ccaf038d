[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dailyalgos"
version = "0.1.0"
description = "Classic array, string and linked-list algorithms with a small demo command"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "linked-list", "arrays", "strings", "interview"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dailyalgos = "dailyalgos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dailyalgos"]

[tool.pytest.ini_options]
addopts = "-ra"
