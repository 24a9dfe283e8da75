[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polykernels"
version = "0.1.0"
description = "Polyhedral benchmark kernels for data mining and dense linear algebra, with deterministic inputs and dumpable outputs"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "benchmark",
    "linear-algebra",
    "polyhedral",
    "kernels",
    "blas",
    "numerical",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["polykernels"]

[tool.hatch.build.targets.sdist]
include = [
    "polykernels",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
