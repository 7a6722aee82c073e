[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fontboy"
version = "0.1.0"
description = "Toolkit-independent models for font browser widgets: flattenable fonts, split panes, box grids, colour previews, sliders and preferences"
requires-python = ">=3.10"
keywords = ["fonts", "widgets", "split pane", "layout", "preferences"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Text Processing :: Fonts",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fontboy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
