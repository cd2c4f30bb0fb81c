import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .errors import ConfigurationError

WORKDIR_ENV = "CURL_PARSER_WORKDIR"


@dataclass(frozen=True)
class ParserConfig:
    """Настройки парсера.

    working_directory: база для относительных путей в @file.
    None -> текущая директория. Путь проверяется один раз, при создании.
    """

    working_directory: Union[str, os.PathLike, None] = None

    def __post_init__(self):
        raw = self.working_directory
        if raw is None:
            path = Path.cwd()
        else:
            raw = os.fspath(raw)
            if raw == "":
                raise ConfigurationError("working directory must not be empty")
            path = Path(raw)
            if not path.exists():
                raise ConfigurationError(f"working directory does not exist: {raw}")
            if not path.is_dir():
                raise ConfigurationError(f"working directory is not a directory: {raw}")
        object.__setattr__(self, "working_directory", path.resolve())

    @classmethod
    def from_env(cls, default: Optional[str] = None) -> "ParserConfig":
        """Read the working directory from CURL_PARSER_WORKDIR, if set."""
        return cls(os.environ.get(WORKDIR_ENV) or default)
