[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studytodo"
version = "1.0.0"
description = "A small interactive task and deadline organiser for students, with a staging queue and a plain-text store."
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "deadlines", "students", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studytodo = "studytodo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["studytodo"]

[tool.pytest.ini_options]
addopts = "-ra"
