[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polykernels"
version = "0.1.0"
description = "Polyhedral benchmark kernels (linear algebra, solvers, data mining, medley) written with NumPy, with deterministic inputs, timing and reference dumps"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "benchmark",
    "polyhedral",
    "linear-algebra",
    "kernels",
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
    "Topic :: System :: Benchmark",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
polykernels-correlation = "polykernels.correlation:main"
polykernels-covariance = "polykernels.covariance:main"
polykernels-floyd-warshall = "polykernels.floyd_warshall:main"
polykernels-reg-detect = "polykernels.reg_detect:main"
polykernels-atax = "polykernels.atax:main"
polykernels-2mm = "polykernels.two_mm:main"
polykernels-3mm = "polykernels.three_mm:main"
polykernels-bicg = "polykernels.bicg:main"
polykernels-cholesky = "polykernels.cholesky:main"
polykernels-trisolv = "polykernels.trisolv:main"
polykernels-doitgen = "polykernels.doitgen:main"
polykernels-gemm = "polykernels.gemm:main"
polykernels-gemver = "polykernels.gemver:main"
polykernels-gesummv = "polykernels.gesummv:main"
polykernels-mvt = "polykernels.mvt:main"
polykernels-symm = "polykernels.symm:main"
polykernels-syr2k = "polykernels.syr2k:main"
polykernels-syrk = "polykernels.syrk:main"
polykernels-trmm = "polykernels.trmm:main"
polykernels-durbin = "polykernels.durbin:main"
polykernels-dynprog = "polykernels.dynprog:main"
polykernels-lu = "polykernels.lu:main"
polykernels-ludcmp = "polykernels.ludcmp:main"
polykernels-gramschmidt = "polykernels.gramschmidt:main"
polykernels-gramschmidt-variants = "polykernels.gramschmidt_variants:main"

[tool.hatch.build.targets.wheel]
packages = ["polykernels"]

[tool.hatch.build.targets.sdist]
include = [
    "polykernels",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
