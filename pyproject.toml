[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fakepico"
version = "0.1.0"
description = "Core of a fantasy-console emulator: memory layout, pixel helpers, cart text conversion, Lua dialect patching and a software renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "fantasy-console", "graphics", "retro", "lua"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Emulators",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fakepico"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
