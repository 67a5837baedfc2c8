[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genengine"
version = "0.0.1"
description = "Core pieces of a small game engine: logging, versions, frame timing, file access, swapchain selection and a source formatter command"
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "logging", "vulkan", "swapchain", "clang-format"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
genengine-format = "genengine.formatter:main"

[tool.hatch.build.targets.wheel]
packages = ["genengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
