[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlab"
version = "0.1.0"
description = "Small networking exercises: routing tables, traffic shaping, and TCP/UDP client-server services."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "networking",
    "sockets",
    "tcp",
    "udp",
    "distance-vector",
    "leaky-bucket",
    "stop-and-wait",
    "echo",
    "file-transfer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netlab-distvector = "netlab.distvector:main"
netlab-leakybucket = "netlab.leakybucket:main"
netlab-reversal = "netlab.reversal:main"
netlab-matrix = "netlab.matrix:main"
netlab-time = "netlab.timesvc:main"
netlab-ftp = "netlab.filetransfer:main"
netlab-echo = "netlab.echo:main"
netlab-stopwait = "netlab.stopwait:main"

[tool.hatch.build.targets.wheel]
packages = ["netlab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
