[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "computerroom"
version = "0.1.0"
description = "A small arcade toy: steer Beato around a wrapping screen, enter the secret gamepad sequence and fire lightning."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "gamepad", "drand48"]
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
computerroom = "computerroom.application:main"

[tool.hatch.build.targets.wheel]
packages = ["computerroom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
