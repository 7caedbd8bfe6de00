"""Filesystem integration."""

from starter_kit.integrations.file_store.abc import FileStore
from starter_kit.integrations.file_store.fake import FakeFileStore
from starter_kit.integrations.file_store.real import RealFileStore

__all__ = ["FakeFileStore", "FileStore", "RealFileStore"]
