[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "img2ascii"
version = "1.0.0"
description = "Convert images to ASCII art, optionally coloured, for display in a terminal"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["ascii", "ascii-art", "image", "terminal", "converter"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
img2ascii = "img2ascii.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["img2ascii"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
