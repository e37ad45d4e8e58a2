[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labworks"
version = "0.1.0"
description = "Small programming exercises: name formatting, bit tricks, a gap sort, a card game, word dictionaries and a doubly linked list"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked-list",
    "trie",
    "dictionary",
    "card-game",
    "euchre",
    "bit-manipulation",
    "sorting",
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labworks-magic = "labworks.magic:main"
labworks-tip = "labworks.tip:main"
labworks-gapsort = "labworks.gapsort:main"
labworks-bits = "labworks.bits:main"
labworks-dictionary = "labworks.dictionary:main"
labworks-euchre = "labworks.game:main"
labworks-lldemo = "labworks.lldemo:main"

[tool.hatch.build.targets.wheel]
packages = ["labworks"]

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
