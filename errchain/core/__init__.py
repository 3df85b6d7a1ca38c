"""Core error types and chain inspection."""

from .chain import downcast, dump, find, relation_of, source_of, walk
from .chained import ChainedError
from .config import Config, ConfigError, SnapshotConfig, active_config, configure, load_config
from .errors import ExitCode
from .relation import Constituent, Previous, Relation
from .result import Err, Ok, Result, is_err, is_ok
from .snapshot import StackSnapshot
from .specifics import (
    ContextInitError,
    ErrorSpecifics,
    InvalidArgument,
    IoctlError,
    IoctlResultTooLarge,
    MetadataIoError,
)

__all__ = [
    # chained
    "ChainedError",
    # relation
    "Constituent",
    "Previous",
    "Relation",
    # chain
    "downcast",
    "dump",
    "find",
    "relation_of",
    "source_of",
    "walk",
    # snapshot
    "StackSnapshot",
    # specifics
    "ContextInitError",
    "ErrorSpecifics",
    "InvalidArgument",
    "IoctlError",
    "IoctlResultTooLarge",
    "MetadataIoError",
    # errors
    "ExitCode",
    # config
    "Config",
    "ConfigError",
    "SnapshotConfig",
    "active_config",
    "configure",
    "load_config",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
