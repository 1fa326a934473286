[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameoverlay"
version = "0.9.3"
description = "Read game text with OCR, translate it through a browser tab and lay out the translation over the game window"
requires-python = ">=3.10"
keywords = ["ocr", "translation", "overlay", "games", "screen capture"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Image Recognition",
    "Topic :: Text Processing :: Linguistic",
]
dependencies = [
    "platformdirs",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gameoverlay = "gameoverlay.session:main"

[tool.hatch.build.targets.wheel]
packages = ["gameoverlay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
