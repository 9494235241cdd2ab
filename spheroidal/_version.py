"""
Exposes the version of spheroidal
"""
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_VERSION_FILE = Path(__file__).with_name('VERSION')

try:
    __version__ = version('spheroidal')
except PackageNotFoundError:
    # Running from a source tree without installed metadata
    __version__ = _VERSION_FILE.read_text(encoding='utf-8').strip()

__all__ = ['__version__']
