[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dbadmin"
version = "0.9.0"
description = "An interactive command-line database privilege manager"
requires-python = ">=3.10"
dependencies = [
    "pymysql",
]
keywords = ["database", "privileges", "users", "cli", "administration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dbadmin = "dbadmin.main:main"

[tool.hatch.build.targets.wheel]
packages = ["dbadmin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
