[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "devagent"
version = "0.1.0"
description = "Parse, locate, list and create Markdown agent files kept in a .devai/ workspace folder."
requires-python = ">=3.11"
dependencies = []
keywords = ["agent", "markdown", "llm", "code-generation", "cli", "devai"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
devagent = "devagent.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["devagent"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 110
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
