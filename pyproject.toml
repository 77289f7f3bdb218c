[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tiendarec"
version = "0.1.0"
description = "Users, preferences and product browsing history for a small shop recommender"
requires-python = ">=3.10"
dependencies = []
keywords = ["shop", "users", "history", "binary search tree", "queue"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tiendarec = "tiendarec.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tiendarec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
