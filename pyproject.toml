[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyaes"
version = "0.1.0"
description = "A small, dependency-free AES-128 block encryption implementation"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "aes128", "cipher", "encryption", "ecb", "rijndael"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyaes-demo = "tinyaes.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyaes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
