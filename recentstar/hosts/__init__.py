"""Concrete hosts the panel can run against."""

from __future__ import annotations

from .filesystem import FileItem, FileSystemHost

__all__ = ["FileItem", "FileSystemHost"]
