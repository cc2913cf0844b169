[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vintf"
version = "0.1.0"
description = "Value types and containers for vendor interface manifests and compatibility matrices: versions, flags, HAL groups and XML file entries"
requires-python = ">=3.10"
dependencies = []
keywords = ["vintf", "hal", "manifest", "compatibility-matrix", "versioning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vintf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
