[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "neon"
version = "0.1.0"
description = "A small tile-based ray tracing framework with spheres, Phong materials and PNG output"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["ray tracing", "rendering", "graphics", "phong", "camera", "png"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
neon-sandbox = "neon.sandbox:main"

[tool.hatch.build.targets.wheel]
packages = ["neon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
