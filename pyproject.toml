[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternlab"
version = "0.1.0"
description = "Small runnable examples of classic design patterns: library records, observers, state machines, singletons, factories, builders, adapters, facades and decorators."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "observer",
    "state-machine",
    "singleton",
    "factory",
    "builder",
    "adapter",
    "facade",
    "decorator",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternlab-library = "patternlab.library:main"
patternlab-observer = "patternlab.observer:main"
patternlab-player = "patternlab.player:main"
patternlab-bank = "patternlab.bank:main"
patternlab-logger = "patternlab.logger:main"
patternlab-sensors = "patternlab.sensors:main"
patternlab-uart = "patternlab.uart:main"
patternlab-temperature = "patternlab.temperature:main"
patternlab-facade = "patternlab.facade:main"
patternlab-beverage = "patternlab.beverage:main"

[tool.hatch.build.targets.wheel]
packages = ["patternlab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
