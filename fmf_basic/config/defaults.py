"""Default configuration parameters for the utility library."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LoggingParams:
    """Structured logging parameters."""
    level: str = "WARNING"                           # Library stays quiet by default
    format_json: bool = False                        # JSON lines vs console renderer
    include_timestamp: bool = True
    include_caller: bool = False                     # Add filename/line number


@dataclass(frozen=True)
class TextParams:
    """Codec error handlers used when converting between bytes and text."""
    decode_errors: str = "replace"                   # Malformed input -> U+FFFD
    encode_errors: str = "replace"                   # Unmappable characters -> '?'


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    logging: LoggingParams = field(default_factory=LoggingParams)
    text: TextParams = field(default_factory=TextParams)


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig()
