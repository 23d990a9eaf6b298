[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seamcarve"
version = "0.1.0"
description = "Content-aware image narrowing by seam carving for uncompressed 24-bit BMP images"
requires-python = ">=3.10"
dependencies = []
keywords = ["seam carving", "image resizing", "bmp", "content-aware"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
seamcarve = "seamcarve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["seamcarve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
