"""Configuration management for the mocksmith command line."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _split_paths(value: str) -> list[Path]:
    return [Path(part) for part in value.split(os.pathsep) if part]


@dataclass
class Config:
    """Configuration for a mocksmith run."""

    include_dirs: list[Path] = field(default_factory=list)
    output_file: Optional[Path] = None
    output_dir: Optional[Path] = None
    verbose: bool = False
    silent: bool = False
    always_write: bool = False
    log_dir: Optional[Path] = None

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

        include_dirs = _split_paths(os.getenv("MOCKSMITH_INCLUDE_DIRS", ""))
        log_dir_str = os.getenv("MOCKSMITH_LOG_DIR")
        verbose_str = os.getenv("MOCKSMITH_VERBOSE", "false").lower()

        return cls(
            include_dirs=include_dirs,
            verbose=verbose_str in ("true", "1", "yes"),
            log_dir=Path(log_dir_str) if log_dir_str else None,
        )

    @classmethod
    def from_args(
        cls,
        include_dirs: Optional[list[Path]] = None,
        output_file: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        verbose: Optional[bool] = None,
        silent: Optional[bool] = None,
        always_write: Optional[bool] = None,
        log_dir: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Returns:
            Config object
        """
        config = cls.from_env()

        if include_dirs:
            config.include_dirs = list(include_dirs)
        if output_file is not None:
            config.output_file = output_file
            config.output_dir = None
        if output_dir is not None:
            config.output_dir = output_dir
        if verbose is not None:
            config.verbose = verbose
        if silent is not None:
            config.silent = silent
        if always_write is not None:
            config.always_write = always_write
        if log_dir is not None:
            config.log_dir = log_dir

        return config

    @property
    def writes_files(self) -> bool:
        return self.output_file is not None or self.output_dir is not None

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.output_file is not None and self.output_dir is not None:
            raise ValueError("Cannot write both to an output file and an output directory")

        if self.output_dir is not None and self.output_dir.exists() and not self.output_dir.is_dir():
            raise ValueError(f"Not a directory: {self.output_dir}")

        for include_dir in self.include_dirs:
            if include_dir.exists() and not include_dir.is_dir():
                raise ValueError(f"Include path is not a directory: {include_dir}")

        if self.verbose and self.silent:
            raise ValueError("Cannot be both verbose and silent")
