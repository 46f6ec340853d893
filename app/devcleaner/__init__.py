"""devcleaner - reclaim disk space from developer toolchain caches.

Discovers build-tool projects (Flutter, PlatformIO, Visual Studio, Node)
below a directory and removes their build artifacts and caches.
"""

__version__ = "1.3.0"
