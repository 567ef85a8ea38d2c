[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solidsnake"
version = "0.1.0"
description = "Opcode table and native Fibonacci benchmark command for the Solid Snake register virtual machine"
requires-python = ">=3.10"
keywords = ["virtual machine", "bytecode", "opcodes", "instruction set", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
solidsnake = "solidsnake.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["solidsnake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
