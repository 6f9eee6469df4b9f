__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'argosy'
__author__ = 'argosy contributors'
__license__ = 'MIT'
__version__ = "0.1.0"

from .values import *
from .specs import *
from .faults import *
from .assembly import *
from .helps import *
from .engine import *
from .render import *

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

# Load the exposed API of the value model
__all__ += values.__all__  # type: ignore[attr-defined]
# Load the exposed API of the schema specs
__all__ += specs.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the assembler
__all__ += assembly.__all__  # type: ignore[attr-defined]
# Load the exposed API of the help projector
__all__ += helps.__all__  # type: ignore[attr-defined]
# Load the exposed API of the engine
__all__ += engine.__all__  # type: ignore[attr-defined]
# Load the exposed API of the renderer
__all__ += render.__all__  # type: ignore[attr-defined]
