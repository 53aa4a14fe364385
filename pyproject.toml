[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noisekit"
version = "0.1.0"
description = "Composable noise functions, modifiers, fractals, noise maps and colour gradients"
requires-python = ">=3.10"
dependencies = []
keywords = ["noise", "procedural", "fractal", "fbm", "terrain", "gradient"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["noisekit"]

[tool.pytest.ini_options]
addopts = "-ra"
