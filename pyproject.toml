[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xnetframe"
version = "0.1.0"
description = "Building blocks for threaded network programs: TCP/UDP socket wrappers, a TCP channel, binary streams, a blocking queue and small helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["networking", "tcp", "udp", "sockets", "stream", "queue", "tokenizer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xnetframe = "xnetframe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["xnetframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
