[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "logicboard"
version = "0.1.0"
description = "An interactive board for placing, wiring and evaluating logic gates"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic gates", "digital logic", "circuit", "education", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logicboard = "logicboard.app:main"

[tool.setuptools.packages.find]
include = ["logicboard*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
