[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "judgesolve"
version = "0.1.0"
description = "Solvers for classic online-judge problems: scheduling, grid search, simulation and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "online-judge",
    "dijkstra",
    "bfs",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
judgesolve-meeting-rooms = "judgesolve.meeting_rooms:main"
judgesolve-exam-supervisors = "judgesolve.exam_supervisors:main"
judgesolve-shortest-subarray = "judgesolve.shortest_subarray:main"
judgesolve-compression = "judgesolve.compression:main"
judgesolve-light-switches = "judgesolve.light_switches:main"
judgesolve-matrix-product = "judgesolve.matrix_product:main"
judgesolve-hide-and-seek = "judgesolve.hide_and_seek:main"
judgesolve-cheapest-path = "judgesolve.cheapest_path:main"
judgesolve-marble-escape = "judgesolve.marble_escape:main"
judgesolve-gears = "judgesolve.gears:main"
judgesolve-baby-shark = "judgesolve.baby_shark:main"

[tool.hatch.build.targets.wheel]
packages = ["judgesolve"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
