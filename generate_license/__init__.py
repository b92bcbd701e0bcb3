"""Generate a LICENSE file from bundled SPDX license templates."""

__version__ = "0.1.0"
