[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prayerclock"
version = "0.1.0"
description = "An analogue clock with prayer times and prayer rules, drawn with a small immediate-mode canvas on pygame"
requires-python = ">=3.10"
keywords = ["clock", "prayer", "pygame", "canvas", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
prayerclock = "prayerclock.app:main"
prayerclock-demo = "prayerclock.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["prayerclock"]

[tool.pytest.ini_options]
addopts = "-ra"
