[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gravsphincs"
version = "0.1.0"
description = "Building blocks of the Gravity-SPHINCS hash-based signature scheme in pure Python"
requires-python = ">=3.10"
keywords = [
    "gravity-sphincs",
    "sphincs",
    "hash-based signatures",
    "post-quantum",
    "haraka",
    "merkle tree",
    "wots",
    "pors",
    "drbg",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gravsphincs"]

[tool.hatch.build.targets.sdist]
include = [
    "gravsphincs",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
