[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bidplanner"
version = "1.0.0"
description = "Console tools for auction bids and course planning, built on a linked list, a chained hash table, sorting routines and a binary search tree."
requires-python = ">=3.10"
dependencies = []
keywords = ["data-structures", "linked-list", "hash-table", "binary-search-tree", "sorting", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bid-sorting = "bidplanner.sorting:main"
bid-hashtable = "bidplanner.hashtable:main"
bid-linkedlist = "bidplanner.linkedlist:main"
course-planner = "bidplanner.courses:main"

[tool.hatch.build.targets.wheel]
packages = ["bidplanner"]

[tool.pytest.ini_options]
addopts = "-ra"
