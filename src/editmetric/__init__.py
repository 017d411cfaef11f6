"""editmetric: Levenshtein edit distance over decoded code points."""
from importlib.metadata import version, PackageNotFoundError

from .distance import distance
from .encoding import EncodedText, InvalidEncodingError

try:
    __version__ = version("editmetric")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__", "distance", "EncodedText", "InvalidEncodingError"]
