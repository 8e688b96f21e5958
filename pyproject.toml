[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pseudoso"
version = "0.1.0"
description = "A small teaching pseudo operating system: process dispatcher, process queues, main memory and a disk with a file directory"
requires-python = ">=3.10"
dependencies = []
keywords = ["operating-system", "dispatcher", "process-queue", "simulation", "education", "disk"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pseudoso = "pseudoso.system:main"

[tool.hatch.build.targets.wheel]
packages = ["pseudoso"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
