[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pidarx"
version = "0.1.0"
description = "Discrete PID control loop simulator with a signal generator and an ARX plant model"
requires-python = ">=3.10"
dependencies = []
keywords = ["pid", "arx", "control", "simulation", "regulator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pidarx = "pidarx.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pidarx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
