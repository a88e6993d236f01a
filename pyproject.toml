[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "foldermap"
version = "0.1.0"
description = "A tree-shaped mind map whose nodes are folders on disk"
requires-python = ">=3.10"
dependencies = []
keywords = ["mind map", "folders", "tree", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
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
foldermap = "foldermap.gui:main"

[tool.setuptools.packages.find]
include = ["foldermap*"]

[tool.pytest.ini_options]
addopts = "-ra"
