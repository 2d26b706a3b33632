"""Configuration management for the path generator CLI."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() in ("true", "1", "yes", "on")


@dataclass
class Config:
    """Configuration for the path generator CLI."""

    output_prefix: Optional[str] = None
    extension: Optional[str] = None
    ascii_only: bool = False
    verbose: bool = False
    log_dir: Path = Path("logs")

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        return cls(
            output_prefix=os.getenv("OUTPUT_PREFIX") or None,
            extension=os.getenv("OUTPUT_EXTENSION") or None,
            ascii_only=_env_flag("ASCII_ONLY"),
            verbose=_env_flag("VERBOSE"),
            log_dir=Path(os.getenv("LOG_DIR", "logs")),
        )

    @classmethod
    def from_args(
        cls,
        output_prefix: Optional[str] = None,
        extension: Optional[str] = None,
        ascii_only: Optional[bool] = None,
        verbose: Optional[bool] = None,
        env_path: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            output_prefix: Output directory prefix (overrides env)
            extension: File extension (overrides env)
            ascii_only: Restrict names to 7-bit ASCII (overrides env)
            verbose: Enable verbose output (overrides env)
            env_path: Optional path to .env file

        Returns:
            Config object
        """
        config = cls.from_env(env_path)

        if output_prefix is not None:
            config.output_prefix = output_prefix
        if extension is not None:
            config.extension = extension
        if ascii_only is not None:
            config.ascii_only = ascii_only
        if verbose is not None:
            config.verbose = verbose

        return config

    def validate(self, separator: str = "/") -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.extension is not None:
            if not self.extension.startswith("."):
                raise ValueError(f"Extension must start with '.': {self.extension!r}")
            if separator in self.extension:
                raise ValueError(f"Extension must not contain {separator!r}: {self.extension!r}")
