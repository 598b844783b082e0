[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xtcpnl"
version = "0.1.0"
description = "Decoders for Linux netlink sock_diag messages and TCP socket statistics"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "netlink",
    "sock_diag",
    "inet_diag",
    "tcp_info",
    "pcap",
    "tcp",
    "monitoring",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xtcpnl"]

[tool.hatch.build.targets.sdist]
include = ["xtcpnl", "tests", "README.md", "pyproject.toml"]

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
strict = true
