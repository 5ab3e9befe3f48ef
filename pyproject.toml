[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "greedylab"
version = "0.1.0"
description = "Classic search, graph and greedy algorithms with small command-line demos"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graph",
    "bfs",
    "dfs",
    "dijkstra",
    "kruskal",
    "prim",
    "a-star",
    "8-puzzle",
    "n-queens",
    "graph-coloring",
    "job-scheduling",
    "selection-sort",
    "expert-system",
    "chatbot",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
greedylab-traversal = "greedylab.traversal:main"
greedylab-dijkstra = "greedylab.dijkstra:main"
greedylab-kruskal = "greedylab.kruskal:main"
greedylab-prim = "greedylab.prim:main"
greedylab-coloring = "greedylab.coloring:main"
greedylab-jobs = "greedylab.job_scheduling:main"
greedylab-sort = "greedylab.selection_sort:main"
greedylab-puzzle = "greedylab.puzzle:main"
greedylab-nqueens = "greedylab.nqueens:main"
greedylab-chatbot = "greedylab.chatbot:main"
greedylab-employee = "greedylab.employee:main"

[tool.hatch.build.targets.wheel]
packages = ["greedylab"]

[tool.hatch.build.targets.sdist]
include = ["greedylab", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
