[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledmatrix"
version = "0.1.0"
description = "Row-scanning LED matrix display driver with a built-in 5x7 bitmap font"
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "matrix", "display", "font", "bitmap", "scanning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ledmatrix-demo = "ledmatrix.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ledmatrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
