from importlib.metadata import PackageNotFoundError, version

try:
    version = version("PennTok")
except PackageNotFoundError:
    version = "0.0.0"
