[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qaterial"
version = "1.4.0"
description = "Material Design building blocks: color themes, responsive grid layout, icon/label positioning, text files and folder trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["material", "design", "theme", "layout", "ui", "colors", "grid"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qaterial"]

[tool.pytest.ini_options]
addopts = "-ra"
