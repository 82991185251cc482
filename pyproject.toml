[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "violetkit"
version = "0.1.0"
description = "Rust-flavoured utility types: Optional, reference counting, string refs, wrapping arithmetic and environment helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["optional", "refcount", "stringref", "wrapping-arithmetic", "utilities"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["violetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
