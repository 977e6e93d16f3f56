[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dqpskmod"
version = "0.1.0"
description = "π/4-DQPSK baseband modulator with root-raised-cosine pulse shaping"
requires-python = ">=3.10"
dependencies = []
keywords = ["dqpsk", "modulation", "sdr", "rrc", "baseband", "iq"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dqpskmod = "dqpskmod.transmitter:main"

[tool.hatch.build.targets.wheel]
packages = ["dqpskmod"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
