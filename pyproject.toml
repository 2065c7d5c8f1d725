[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "egedemos"
version = "0.1.0"
description = "A collection of small animated graphics demos: fractals, physics toys, screensavers and tiny games."
requires-python = ">=3.10"
keywords = [
    "graphics",
    "demo",
    "fractal",
    "mandelbrot",
    "julia",
    "screensaver",
    "tetris",
    "snake",
    "pygame",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
egedemos-mandelbrot = "egedemos.mandelbrot:main"
egedemos-julia = "egedemos.julia:main"
egedemos-lines = "egedemos.lines:main"
egedemos-triangles = "egedemos.triangles:main"
egedemos-balls = "egedemos.balls:main"
egedemos-mouseball = "egedemos.mouseball:main"
egedemos-fireworks = "egedemos.fireworks:main"
egedemos-net = "egedemos.net:main"
egedemos-tetris = "egedemos.tetris:main"
egedemos-snake = "egedemos.snake:main"
egedemos-starfield = "egedemos.starfield:main"
egedemos-typegame = "egedemos.typegame:main"
egedemos-clock = "egedemos.clock:main"
egedemos-shapes = "egedemos.shapes:main"
egedemos-input = "egedemos.inputdemo:main"

[tool.hatch.build.targets.wheel]
packages = ["egedemos"]

[tool.hatch.build.targets.sdist]
include = [
    "egedemos",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
