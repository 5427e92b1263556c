[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kyberkem"
version = "0.1.0"
description = "Pure-Python building blocks of the Kyber KEM: Keccak, AES-256-CTR, NTT arithmetic, polynomial encodings and a CTR_DRBG"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "kyber",
    "kem",
    "post-quantum",
    "lattice",
    "ntt",
    "sha3",
    "shake",
    "aes",
    "drbg",
    "cryptography",
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kyberkem"]

[tool.hatch.build.targets.sdist]
include = ["kyberkem", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
