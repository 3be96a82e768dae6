[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polymeshkit"
version = "1.0.0"
description = "Import polygonal meshes from CSV cell files, check them for degenerate cells and export them to UCD for visualisation."
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "polygonal mesh", "ucd", "paraview", "geometry", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polymeshkit = "polymeshkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["polymeshkit"]

[tool.pytest.ini_options]
addopts = "-ra"
