[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bgvtoy"
version = "0.1.0"
description = "A small BGV-style homomorphic encryption toy over a polynomial ring"
requires-python = ">=3.10"
dependencies = []
keywords = ["homomorphic encryption", "bgv", "fhe", "polynomial ring", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bgvtoy = "bgvtoy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bgvtoy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
