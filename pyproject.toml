[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "popforecast"
version = "0.1.0"
description = "Estimate population and internet-usage figures from yearly CSV data by interpolation and polynomial regression"
requires-python = ">=3.10"
keywords = ["interpolation", "polynomial regression", "least squares", "population", "forecast", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
popforecast-interpolate = "popforecast.interpolation:main"
popforecast-polyfit = "popforecast.polyfit:main"
popforecast-regression = "popforecast.regression:main"

[tool.hatch.build.targets.wheel]
packages = ["popforecast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
