[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "television"
version = "0.11.9"
description = "Core building blocks of a fuzzy finder: key parsing, keybindings, keymaps, UI feature states, shell integration settings and search history."
requires-python = ">=3.11"
dependencies = []
keywords = ["search", "fuzzy", "keybindings", "keymap", "history", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["television"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
