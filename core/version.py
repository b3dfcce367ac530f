"""Version lookup for the page caption."""
from importlib import metadata

DIST_NAME = "dti-calculator"
APP_NAME = "DTI Calculator"

try:
    __version__ = metadata.version(DIST_NAME)
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    __version__ = "0.1.0"


def version_label(app_name: str = APP_NAME) -> str:
    """Short name and version shown in the page caption, e.g. ``DTI Calculator v0.1.0``."""
    return f"{app_name} v{__version__}"
