[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termdesk"
version = "0.9.3"
description = "Terminal emulator building blocks and a desktop status line generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "xterm", "escape-sequences", "mouse-reporting", "status-bar"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termdesk-status = "termdesk.status:main"

[tool.hatch.build.targets.wheel]
packages = ["termdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
