[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslabsim"
version = "0.1.0"
description = "Small simulations of classic operating-system algorithms: CPU scheduling, paging, page replacement, disk scheduling, file allocation, synchronisation and deadlock handling."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-systems",
    "scheduling",
    "paging",
    "page-replacement",
    "disk-scheduling",
    "file-allocation",
    "dining-philosophers",
    "bankers-algorithm",
    "deadlock",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oslabsim"]

[tool.pytest.ini_options]
addopts = "-ra"
