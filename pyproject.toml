[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mlxkit"
version = "0.1.0"
description = "In-memory RGBA images with a window-like event loop, PNG and XPM42 loaders, and classic string and memory helpers"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["graphics", "image", "pixels", "xpm42", "png", "event-loop", "hooks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mlxkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
