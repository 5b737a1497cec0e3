"""
Module: builder.config

Purpose:
    Configuration dataclass for the builder functions. Defaults reproduce
    the standard CSV layout and "Copy of" naming.

Key Classes:
    - BuilderConfig: Formatting settings for export and duplication

Used By:
    - builder.export: CSV delimiter and line terminator
    - builder.editing: Name prefix for duplicated questions
"""

from dataclasses import dataclass

from question_toolkit.core.models import COPY_NAME_PREFIX


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for builder output formatting.

    Attributes:
        csv_delimiter: Separator between CSV fields (default ",")
        csv_line_terminator: Separator between CSV rows (default "\\n")
        copy_name_prefix: Prefix for duplicated question names (default "Copy of ")
    """
    csv_delimiter: str = ","
    csv_line_terminator: str = "\n"
    copy_name_prefix: str = COPY_NAME_PREFIX


DEFAULT_CONFIG = BuilderConfig()
