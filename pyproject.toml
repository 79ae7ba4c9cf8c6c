[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adsproto"
version = "0.4.4"
description = "Building blocks for the Beckhoff Automation Device Specification (ADS) protocol for PLCs"
requires-python = ">=3.10"
dependencies = []
keywords = ["Beckhoff", "ADS", "AMS", "automation", "device", "PLC", "TwinCAT"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["adsproto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
