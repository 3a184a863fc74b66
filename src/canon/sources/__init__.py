"""Data source backends for registries."""

from canon.sources.abc import DataSource
from canon.sources.callback import CallbackDataSource
from canon.sources.file import FileDataSource
from canon.sources.literal import LiteralDataSource

__all__ = ["CallbackDataSource", "DataSource", "FileDataSource", "LiteralDataSource"]
