from importlib.metadata import PackageNotFoundError, version

try:
    version = version("pdftrail")
except PackageNotFoundError:
    version = "0.0.0"
