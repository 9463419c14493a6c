[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mpbar"
version = "0.1.0"
description = "Building blocks for terminal progress bars: text decorators, size and percentage formatting, column-width synchronisation, moving averages and I/O proxies."
requires-python = ">=3.10"
keywords = ["progress", "progress-bar", "terminal", "cli", "decorators", "eta"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Terminals",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mpbar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
