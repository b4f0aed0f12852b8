[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgpacket"
version = "0.1.0"
description = "Encoding and decoding of OpenPGP packet building blocks: numbers, MPIs, key material, signatures and signature subpackets"
requires-python = ">=3.10"
dependencies = []
keywords = ["openpgp", "pgp", "rfc4880", "packet", "encoding", "mpi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["pgpacket"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
