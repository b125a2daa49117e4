[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emsim"
version = "0.1.0"
description = "Interactive 3D simulation of gravitational and electrostatic interaction between bodies"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["physics", "simulation", "electromagnetism", "gravity", "3d", "rk4", "coulomb"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
emsim = "emsim.renderer:main"

[tool.hatch.build.targets.wheel]
packages = ["emsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
