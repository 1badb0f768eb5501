[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "tdes"
version = "0.1.0"
description = "A small discrete-event simulator for message-passing peers placed in 3D space"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "discrete-event", "distributed-systems", "peer-to-peer", "flow-updating"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tdes = "tdes.main:main"

[tool.setuptools.packages.find]
include = ["tdes*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
