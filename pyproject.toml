[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fictrecords"
version = "1.0.0"
description = "Student records manager: load students and exam results, compute GPA and CGPA, filter and report"
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "gpa", "cgpa", "exam results", "records"]
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
fictrecords = "fictrecords.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fictrecords"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
