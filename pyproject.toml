[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "making-mirrors"
version = "0.0.3"
description = "Create and maintain local bare mirrors of Git repositories"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "mirror", "backup", "clone", "repositories"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: System :: Archiving :: Mirroring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
making-mirrors = "making_mirrors.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["making_mirrors"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
