[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xjtuer"
version = "0.7.0"
description = "Rules of a trap-filled campus platformer on a small entity world: festival stages, museum quiz rooms, leaves, save points and background music."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "levels", "entity-component-system", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xjtuer = "xjtuer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["xjtuer"]

[tool.pytest.ini_options]
addopts = "-ra"
