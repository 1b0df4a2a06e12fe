[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prioqueue"
version = "0.1.0"
description = "A linked-list priority queue with a small timing benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["priority queue", "linked list", "data structures", "benchmark"]
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
prioqueue-benchmark = "prioqueue.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["prioqueue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
