[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kslibs"
version = "0.1.0"
description = "A small project manager that builds, runs and configures C++ projects from a .config.kslibs file"
requires-python = ">=3.10"
dependencies = []
keywords = ["build", "c++", "g++", "project", "compile", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kslibs = "kslibs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kslibs"]

[tool.pytest.ini_options]
addopts = "-ra"
