[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sockdemo"
version = "0.1.0"
description = "Small process and socket demonstrations: running a child program, TCP and UDP hello exchanges, and a TCP echo server"
requires-python = ">=3.10"
dependencies = []
keywords = ["socket", "tcp", "udp", "echo", "subprocess", "networking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sockdemo-fork = "sockdemo.forkexec:main"
sockdemo-tcp-server = "sockdemo.tcp_hello:server_main"
sockdemo-tcp-client = "sockdemo.tcp_hello:client_main"
sockdemo-udp-server = "sockdemo.udp_hello:server_main"
sockdemo-udp-client = "sockdemo.udp_hello:client_main"
sockdemo-echo-server = "sockdemo.echo:server_main"
sockdemo-echo-client = "sockdemo.echo:client_main"

[tool.hatch.build.targets.wheel]
packages = ["sockdemo"]

[tool.pytest.ini_options]
addopts = "-ra"
