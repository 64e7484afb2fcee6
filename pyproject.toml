[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "canadianexp"
version = "0.1.0"
description = "A small editor for posing hierarchical cartoon actors built from image and polygon parts"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["animation", "drawing", "actors", "scene graph", "editor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
canadian-experience = "canadianexp.app:main"

[tool.setuptools.packages.find]
include = ["canadianexp*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
