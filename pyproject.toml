[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "regvm"
version = "0.5.0"
description = "Interpreter for a small register-machine assembly language with 32 signed 32-bit integer registers"
requires-python = ">=3.10"
keywords = ["interpreter", "assembly", "register machine", "simulator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
regvm = "regvm.interpreter:main"

[tool.hatch.build.targets.wheel]
packages = ["regvm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
