[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "squaregame"
version = "0.1.0"
description = "A small top-down arcade game of coloured squares with a state stack, scene graph and keyboard-driven menus"
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "scene-graph", "state-stack"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
squaregame = "squaregame.application:main"

[tool.hatch.build.targets.wheel]
packages = ["squaregame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
