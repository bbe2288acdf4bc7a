[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crcforge"
version = "1.0.1"
description = "Configurable CRC-8, CRC-12, CRC-16, CRC-32 and CRC-64 checksums with named presets"
requires-python = ">=3.10"
dependencies = []
keywords = ["crc", "checksum", "crc8", "crc12", "crc16", "crc32", "crc64", "modbus", "ccitt"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["crcforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
