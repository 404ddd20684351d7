__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'docu'
__author__ = 'Docu Contributors'
__license__ = 'MIT'
__version__ = "0.1.0"

from .switches import *
from .faults import *
from .generators import *
from .application import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

version_info = VersionInfo(0, 1, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the switches
__all__ += switches.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the generators
__all__ += generators.__all__  # type: ignore[attr-defined]
# Load the exposed API of the application
__all__ += application.__all__  # type: ignore[attr-defined]
