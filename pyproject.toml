[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "staffroll"
version = "0.1.0"
description = "Interactive console for keeping an employee roll in CSV or binary files"
requires-python = ">=3.10"
dependencies = []
keywords = ["employees", "payroll", "csv", "console", "linked-list"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
staffroll = "staffroll.main:main"

[tool.hatch.build.targets.wheel]
packages = ["staffroll"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
