[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodeworks"
version = "0.1.0"
description = "Linked lists, array-backed containers and binary search trees, with a collection of classic list and tree algorithms."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked list",
    "binary search tree",
    "data structures",
    "algorithms",
    "deque",
    "queue",
    "stack",
]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nodeworks-bench = "nodeworks.sorting:main"

[tool.hatch.build.targets.wheel]
packages = ["nodeworks"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
