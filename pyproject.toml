[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "handrouter"
version = "0.1.0"
description = "Geometry, preset paths, G-code parsing and CoreXY conversion for a handheld CNC router"
requires-python = ">=3.10"
dependencies = []
keywords = ["cnc", "router", "gcode", "corexy", "motion-control"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["handrouter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
