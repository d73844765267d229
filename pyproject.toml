[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cppstructs"
version = "0.1.0"
description = "Small classic data structures and a game: binary search tree with in-order iterators, complex numbers, matrices and tic-tac-toe"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "binary search tree",
    "iterator",
    "complex numbers",
    "matrix",
    "tic-tac-toe",
    "data structures",
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
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cppstructs-balance = "cppstructs.balance:main"
cppstructs-inorder = "cppstructs.iterator:main"
cppstructs-tictactoe = "cppstructs.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["cppstructs"]

[tool.hatch.build.targets.sdist]
include = ["cppstructs", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
