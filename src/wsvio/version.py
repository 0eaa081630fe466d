from importlib.metadata import PackageNotFoundError, version

try:
    version = version("WsvIO")
except PackageNotFoundError:
    version = "0.0.0"
