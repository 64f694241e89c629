[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rovercore"
version = "0.1.0"
description = "Control logic for a small differential-drive rover: serial message parsing, command queue, task scheduler, sensor conversion and motor output configuration, simulated in software."
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "rover", "scheduler", "parser", "pwm", "ring-buffer", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rovercore = "rovercore.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["rovercore"]

[tool.pytest.ini_options]
addopts = "-ra"
