[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scenebrowse"
version = "1.22.49"
description = "Helpers for a video library browser: options, trash, video file filtering, external tools, directory selection and clipboard entries"
requires-python = ">=3.10"
dependencies = []
keywords = ["video", "thumbnails", "library", "trash", "ffmpeg"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scenebrowse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
