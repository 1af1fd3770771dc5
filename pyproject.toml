[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlist"
version = "0.1.0"
description = "Small number exercises and a singly linked list, with interactive command-line menus"
requires-python = ">=3.10"
dependencies = []
keywords = ["recursion", "linked list", "base conversion", "factorial", "education"]
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
numlist-convert-base = "numlist.convert_base:main"
numlist-sum-digits = "numlist.digits:main"
numlist-recursion = "numlist.recursion:main"
numlist-linked-list = "numlist.linked_list:main"
numlist-list-menu = "numlist.list_menu:main"

[tool.hatch.build.targets.wheel]
packages = ["numlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
