[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysexamples"
version = "0.1.0"
description = "Small, runnable examples of systems programming ideas: threads, processes, pipes, signals, sockets and files."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "systems programming",
    "threads",
    "processes",
    "bounded buffer",
    "dining philosophers",
    "sockets",
    "linked list",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sysexamples-list = "sysexamples.linked_list:main"
sysexamples-hello = "sysexamples.hello:main"
sysexamples-bounded-buffer = "sysexamples.bb_demo:main"
sysexamples-diners = "sysexamples.diner_demo:main"
sysexamples-word-options = "sysexamples.word_options:main"
sysexamples-sock-client = "sysexamples.domain_sock:client_main"
sysexamples-sock-server = "sysexamples.domain_sock:server_main"
sysexamples-dir-list = "sysexamples.file_demos:dir_list_main"
sysexamples-time-server = "sysexamples.time_server:main"

[tool.hatch.build.targets.wheel]
packages = ["sysexamples"]

[tool.pytest.ini_options]
addopts = "-ra"
