[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hbsdata"
version = "0.1.0"
description = "Data layer for Handlebars-style templates: JSON values, paths, block scopes, context navigation and helper functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["handlebars", "templates", "json", "helpers", "context"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hbsdata"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
