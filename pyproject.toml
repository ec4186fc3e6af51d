[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catalogrepo"
version = "0.1.0"
description = "Category and product repositories over any DB-API 2.0 connection"
requires-python = ">=3.10"
dependencies = []
keywords = ["repository", "database", "catalog", "products", "categories", "dbapi", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["catalogrepo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
