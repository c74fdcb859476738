[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minids"
version = "0.1.0"
description = "Small fixed-capacity stacks and queues, a linked list, a linked-list merge sort and tree depth lookup"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "stack",
    "queue",
    "linked-list",
    "merge-sort",
    "binary-tree",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minids-listsort = "minids.listsort:main"

[tool.hatch.build.targets.wheel]
packages = ["minids"]

[tool.hatch.build.targets.sdist]
include = ["minids", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
