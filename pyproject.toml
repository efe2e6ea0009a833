[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tpmattest"
version = "0.1.0"
description = "TPM remote attestation helpers: data types, errors, base64 and JSON payload encoding, and an abstract TPM interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["tpm", "attestation", "tpm2", "base64", "security"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tpmattest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
