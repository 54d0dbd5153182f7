[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "jobboard"
version = "0.1.0"
description = "A small job board that runs a scripted session of member, recruitment and application commands."
requires-python = ">=3.10"
dependencies = []
keywords = ["job board", "recruitment", "applications", "members", "batch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jobboard = "jobboard.app:main"

[tool.setuptools.packages.find]
include = ["jobboard*"]

[tool.pytest.ini_options]
addopts = "-ra"
