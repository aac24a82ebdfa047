[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pypresent"
version = "0.1.0"
description = "The PRESENT lightweight block cipher, with a command for encrypting and decrypting files"
requires-python = ">=3.10"
dependencies = []
keywords = ["present", "block cipher", "lightweight cryptography", "encryption"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.scripts]
pypresent = "pypresent.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pypresent"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
