[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mixinkernel"
version = "0.18.21"
description = "Edwards25519 keys, Schnorr signatures, batch verification and collective signing for a kernel node, plus node configuration loading."
requires-python = ">=3.11"
dependencies = []
keywords = [
    "ed25519",
    "edwards25519",
    "schnorr",
    "cosi",
    "collective-signing",
    "batch-verification",
    "blake3",
    "sha3",
    "ghost-keys",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mixinkernel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
