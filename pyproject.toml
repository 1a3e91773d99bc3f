[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "steamstore"
version = "0.1.0"
description = "Async client for the Steam Storefront API: apps, packages, DLC, prices, featured lists and reviews"
requires-python = ">=3.10"
keywords = ["steam", "store", "api", "storefront", "games", "reviews", "prices"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Framework :: AsyncIO",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "httpx>=0.24",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "pytest-asyncio>=0.21",
]

[project.scripts]
steamstore = "steamstore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["steamstore"]

[tool.hatch.build.targets.sdist]
include = ["steamstore", "tests", "pyproject.toml"]

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
