[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskboard"
version = "0.1.0"
description = "A small SQLite-backed store for users, tasks, task statuses and user-task assignments."
requires-python = ">=3.10"
keywords = ["sqlite", "tasks", "crud", "users", "database"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taskboard-show-users = "taskboard.show_users:main"

[tool.hatch.build.targets.wheel]
packages = ["taskboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
