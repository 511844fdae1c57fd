[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursus"
version = "0.1.0"
description = "Stack-sorting solver, wireframe height-map viewer and Mandelbrot explorer"
requires-python = ">=3.10"
keywords = ["push_swap", "wireframe", "fdf", "height map", "mandelbrot", "fractal", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
push-swap = "cursus.pushswap_cli:main"
fdf = "cursus.fdf_cli:main"
fractol = "cursus.fractol_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cursus"]

[tool.pytest.ini_options]
addopts = "-ra"
