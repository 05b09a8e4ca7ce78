[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hazelcore"
version = "0.1.0"
description = "Engine core for 2D games: key codes, timing, layers, logging, transforms, buffer layouts, cameras, shaders and a batching 2D quad renderer"
requires-python = ">=3.10"
keywords = ["game engine", "2d", "renderer", "camera", "layers", "transforms"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hazelcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
