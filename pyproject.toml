[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysprog"
version = "0.1.0"
description = "Small systems tools: line templates, arithmetic expression trees, image resizing, source line statistics, a tiny shell, TCP/UDP servers and a terminal text viewer"
requires-python = ">=3.10"
dependencies = [
    "pillow",
    "blessed",
]
keywords = [
    "shell",
    "template",
    "expression",
    "image-resize",
    "source-statistics",
    "tcp",
    "udp",
    "proxy",
    "text-viewer",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pillow",
]

[project.scripts]
sysprog-template-basic = "sysprog.template_basic:main"
sysprog-template = "sysprog.template_engine:main"
sysprog-imagecli = "sysprog.imagix:main"
sysprog-rstat = "sysprog.srcstats:main"
sysprog-srcstats-parallel = "sysprog.srcstats:parallel_main"
sysprog-myshell = "sysprog.myshell:main"
sysprog-origin = "sysprog.origin:main"
sysprog-proxy = "sysprog.proxy:main"
sysprog-echo = "sysprog.echo:main"
sysprog-textviewer = "sysprog.textviewer:main"
sysprog-hello = "sysprog.basics:main"
sysprog-channels = "sysprog.channels:main"

[tool.hatch.build.targets.wheel]
packages = ["sysprog"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
