[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslabsim"
version = "0.1.0"
description = "Small simulations of classic operating-system algorithms: memory allocation, deadlock avoidance, disk scheduling, paging, CPU scheduling and semaphores."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "bankers algorithm",
    "first fit",
    "best fit",
    "worst fit",
    "c-scan",
    "lru",
    "round robin",
    "priority scheduling",
    "semaphore",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oslab-allocation = "oslabsim.allocation:main"
oslab-bankers = "oslabsim.bankers:main"
oslab-disk = "oslabsim.disk:main"
oslab-lru = "oslabsim.lru:main"
oslab-scheduling = "oslabsim.scheduling:main"
oslab-semaphore = "oslabsim.semaphore:main"

[tool.hatch.build.targets.wheel]
packages = ["oslabsim"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
