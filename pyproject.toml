[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dialogdomain"
version = "0.3.0"
description = "Domain model for multi-turn conversations: dialogs, turns, topics, participants, context variables and domain events"
requires-python = ">=3.10"
dependencies = []
keywords = ["dialog", "conversation", "domain-driven-design", "event-sourcing", "agents"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dialogdomain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
