[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "education"
version = "0.1.0"
description = "Small, readable implementations of classic algorithms and data structures"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "gcd",
    "primes",
    "binary-search",
    "stack",
    "queue",
    "priority-queue",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
education-demos = "education.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["education"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
