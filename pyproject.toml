[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlib"
version = "0.1.0"
description = "Classic numerical methods: linear systems, interpolation, least squares, quadrature, ODE solvers and root finding."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "gaussian-elimination",
    "lu-decomposition",
    "interpolation",
    "least-squares",
    "quadrature",
    "gauss-legendre",
    "runge-kutta",
    "root-finding",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numlib-examples = "numlib.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["numlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
