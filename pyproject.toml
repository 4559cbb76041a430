[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reqkit"
version = "1.11.1"
description = "Building blocks for HTTP clients: error codes, URL encoding, form and query containers, cookies, credentials, responses and cancellable async results."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "client", "cookies", "url-encoding", "query-string", "async"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reqkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
