[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plotlars"
version = "0.9.6"
description = "Build Plotly figure specifications from pandas data frames with a small, declarative API."
requires-python = ">=3.10"
keywords = ["chart", "plot", "plotly", "pandas", "visualization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "pandas",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["plotlars"]

[tool.pytest.ini_options]
addopts = "-ra"
