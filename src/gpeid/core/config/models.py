"""
Configuration data models for gpeid.

These models define the structure of .gpeid.json and
~/.config/gpeid/config.json files, with validation and type safety via
Pydantic.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class CheckConfig(BaseModel):
    """
    Which files `gpeid check` reads when walking directories.
    """
    extensions: list[str] = Field(
        default_factory=lambda: [".txt", ".md", ".gpeid"],
        description="File suffixes to scan for gpEIDs when walking directories"
    )
    max_file_size_kb: int = Field(
        default=1024,
        ge=1,
        description="Skip files larger than this (in KiB)"
    )

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Ensure every suffix starts with a dot and is lowercase."""
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized


class OutputConfig(BaseModel):
    """How results are reported."""
    format: Literal["text", "json"] = Field(
        default="text",
        description="Output format for validate and check: 'text' or 'json'"
    )
    show_valid: bool = Field(
        default=False,
        description="Also list valid gpEIDs found by check"
    )


class GpeidConfig(BaseModel):
    """
    Top-level gpeid configuration.

    Loaded from defaults, user config, project config, and env vars.

    Example:
        >>> config = GpeidConfig(output=OutputConfig(format="json"))
        >>> config.output.format
        'json'
        >>> config.enabled
        True
    """
    enabled: bool = Field(
        default=True,
        description="Enable/disable gpEID checking of documents"
    )
    check: CheckConfig = Field(
        default_factory=CheckConfig,
        description="Document check settings"
    )
    output: OutputConfig = Field(
        default_factory=OutputConfig,
        description="Output settings"
    )
