[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ddpar"
version = "0.1.0"
description = "Par score and par contract calculation for contract bridge double dummy tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["bridge", "double dummy", "par", "contract bridge", "card games"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ddpar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
