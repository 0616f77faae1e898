from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("hourly-glucose")
except PackageNotFoundError:
    __version__ = "unknown"

from .api import generate_chart  # noqa: F401
from .errors import EmptyInputError, NoDataError, SchemaError  # noqa: F401

__all__ = ["generate_chart", "SchemaError", "EmptyInputError", "NoDataError", "__version__"]
