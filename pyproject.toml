[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "log4kit"
version = "0.1.0"
description = "Thread helpers and a careful printf-style formatter for logging libraries"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "printf", "snprintf", "formatting", "threading", "thread-local"]
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
    "Topic :: System :: Logging",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["log4kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
