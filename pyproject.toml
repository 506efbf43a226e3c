[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortlab"
version = "0.1.0"
description = "Classic sorting algorithms, small student-record exercises and a console school registry"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "bubble sort",
    "insertion sort",
    "merge sort",
    "quick sort",
    "selection sort",
    "education",
    "algorithms",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sortlab = "sortlab.cli:main"
sortlab-pointers = "sortlab.pointers:main"
sortlab-heights = "sortlab.students:heights_main"
sortlab-register = "sortlab.students:register_main"
sortlab-school = "sortlab.school:main"

[tool.hatch.build.targets.wheel]
packages = ["sortlab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
