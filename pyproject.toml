[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "buspages"
version = "0.1.0"
description = "Message page ids, sub-page ids and compressed page archives for a service bus message store"
requires-python = ">=3.10"
dependencies = []
keywords = ["service-bus", "messages", "pages", "zip", "protobuf"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["buspages"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
