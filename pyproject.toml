[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bootkit"
version = "0.1.0"
description = "Boot-loader utilities: MD5/SHA-256 hashing, a minimal printf, CPIO metadata stripping and a driver-matching model"
requires-python = ">=3.10"
dependencies = []
keywords = ["boot", "elfloader", "cpio", "reproducible-builds", "printf", "md5", "sha256", "drivers"]
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
    "Topic :: System :: Boot",
    "Topic :: System :: Archiving",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpio-strip = "bootkit.cpio_strip:main"

[tool.hatch.build.targets.wheel]
packages = ["bootkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
