[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chipcore"
version = "0.1.0"
description = "Building blocks for a smart-home networking stack: pooled packet buffers, in-memory end points, a system layer and fault injection"
requires-python = ">=3.10"
dependencies = []
keywords = ["smart-home", "packet-buffer", "networking", "endpoint", "fault-injection"]
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
    "Topic :: Home Automation",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chipcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
