[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spinsync"
version = "0.1.0"
description = "Spin-and-yield synchronization primitives: ticket lock, semaphores, condition variable, read-write lock, per-thread storage and a producer-consumer runner"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "threading",
    "synchronization",
    "ticket-lock",
    "semaphore",
    "condition-variable",
    "rwlock",
    "producer-consumer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
cp-pattern = "spinsync.cp_pattern:main"

[tool.hatch.build.targets.wheel]
packages = ["spinsync"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
