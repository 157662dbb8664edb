[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "discorduser"
version = "0.2.0"
description = "Typed models, identifiers, flags, validation and request payloads for the Discord user API"
requires-python = ">=3.10"
dependencies = []
keywords = ["discord", "snowflake", "models", "payloads", "permissions"]
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
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["discorduser"]

[tool.pytest.ini_options]
addopts = "-ra"
