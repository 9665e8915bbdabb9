[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algos"
version = "0.1.0"
description = "Classic algorithms, data structures and small numerical routines"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "scipy",
]
keywords = [
    "algorithms",
    "data-structures",
    "binary-tree",
    "dynamic-programming",
    "game-of-life",
    "hmm",
    "dirichlet",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
algos = "algos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algos"]

[tool.pytest.ini_options]
addopts = "-ra"
