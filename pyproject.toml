[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taurus"
version = "0.1.0"
description = "General-purpose helpers: string and mapping utilities, PostGIS-style geometries, Jinja2 templates, rotating logs, a notification model, gRPC management and RSA keys."
requires-python = ">=3.10"
keywords = ["utilities", "geometry", "wkt", "geojson", "logging", "grpc", "templates", "rsa"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "cryptography",
    "grpcio",
    "jinja2",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["taurus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
