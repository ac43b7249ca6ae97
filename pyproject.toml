[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chipvm"
version = "1.0.0"
description = "A CHIP-8 virtual machine with a pygame front end"
requires-python = ">=3.10"
keywords = ["chip8", "chip-8", "emulator", "virtual machine", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: System :: Emulators",
]
dependencies = [
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
chipvm = "chipvm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chipvm"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
