"""dockforge CLI - generate Docker artifacts for Python applications."""

from dockforge_common import DOCKFORGE_VERSION

__version__ = DOCKFORGE_VERSION
