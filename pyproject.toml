[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpusched"
version = "0.1.0"
description = "Console demonstrations of CPU scheduling: FCFS, SJF and round robin, plus a small threading demo"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "fcfs", "sjf", "round-robin", "operating-systems", "teaching"]
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
cpusched-fcfs = "cpusched.fcfs:main"
cpusched-sjf = "cpusched.sjf:main"
cpusched-rr = "cpusched.round_robin:main"
cpusched-threads = "cpusched.threads:main"

[tool.hatch.build.targets.wheel]
packages = ["cpusched"]

[tool.pytest.ini_options]
addopts = "-ra"
