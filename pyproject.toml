[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fcitxkeytrans"
version = "5.1.10"
description = "Lookup tables between X keysyms, Qt key codes and Unicode characters for input method front ends"
requires-python = ">=3.10"
dependencies = []
keywords = ["fcitx", "keysym", "qt", "keyboard", "input method", "xkb", "unicode"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Internationalization",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fcitxkeytrans"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
