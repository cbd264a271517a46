[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtetui"
version = "1.0.0"
description = "Terminal dashboard for P4 run-time environments driven through the rtecli tool"
requires-python = ">=3.10"
keywords = ["p4", "rtecli", "smartnic", "tui", "monitoring", "counters", "registers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]
dependencies = [
    "rich",
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rtetui = "rtetui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rtetui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
