[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "proompt"
version = "0.1.0"
description = "Manage prompt files across directory, project and user locations, and fill in their placeholders"
requires-python = ">=3.10"
keywords = ["prompts", "templates", "placeholders", "cli", "llm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
proompt = "proompt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["proompt"]

[tool.pytest.ini_options]
addopts = "-ra"
