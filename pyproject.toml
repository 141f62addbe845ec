[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "s3de"
version = "0.1.0"
description = "Scene file loading, curve interpolation, window bookkeeping and a free-look camera for simple 3D engines"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["3d", "camera", "scene", "interpolation", "parser", "loader"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["s3de"]

[tool.pytest.ini_options]
addopts = "-ra"
