[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "steam-optionx"
version = "0.3.1"
description = "Modify app launch options in Steam's config file"
requires-python = ">=3.11"
keywords = ["steam", "launch-options", "vdf", "localconfig", "keyvalues"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "platformdirs",
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.gui-scripts]
steam-optionx = "steam_optionx.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["steam_optionx"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
