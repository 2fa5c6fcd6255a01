[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "protocodegen"
version = "0.13.5"
description = "Naming, escaping, comment and protoc helpers for generating Rust code from Protocol Buffers descriptors"
requires-python = ">=3.10"
dependencies = [
    "protobuf",
]
keywords = ["protobuf", "protoc", "code generation", "descriptors", "identifiers"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["protocodegen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
