[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fleetstrike"
version = "0.1.0"
description = "A naval battle board game with computer opponents, local two-player play and saved statistics."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["battleship", "board game", "game", "pygame", "ai"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fleetstrike = "fleetstrike.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fleetstrike"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
