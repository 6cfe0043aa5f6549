"""Environment and source loaders."""

from dumact.environment.core import Environment, compile_source
from dumact.environment.loaders import DictLoader, FileSystemLoader, FunctionLoader, Loader

__all__ = [
    "DictLoader",
    "Environment",
    "FileSystemLoader",
    "FunctionLoader",
    "Loader",
    "compile_source",
]
