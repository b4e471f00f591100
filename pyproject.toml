[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bstpqueue"
version = "0.1.0"
description = "A stable priority queue built on a binary search tree keyed on priority"
requires-python = ">=3.10"
dependencies = []
keywords = ["priority queue", "binary search tree", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bstpqueue-demo = "bstpqueue.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["bstpqueue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
