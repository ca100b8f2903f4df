"""
Chartcap - ranking, capping and "Others" bucketing for category charts.
"""

import sys
from typing import Any, Optional
from pathlib import Path
from dotenv import load_dotenv

from .infrastructure.capping import CapConfig

__version__ = "1.0.0"

_config = {
    "verbose": False,
}


def _exception_handler(
    exc_type: type, exc_value: BaseException, exc_traceback: Any
) -> None:
    """Print `Type: message` for uncaught errors unless verbose is on."""
    if _config["verbose"]:
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
    else:
        print(f"{exc_type.__name__}: {exc_value}")


def _load_env_file(env_file_path: Optional[str]) -> bool:
    if env_file_path:
        env_file = Path(env_file_path)
        if not env_file.exists():
            return False
        return load_dotenv(dotenv_path=env_file)
    return load_dotenv()


def configure(
    env_file_path: Optional[str] = None,
    verbose: bool = False,
) -> bool:
    """
    Configure the Chartcap library.

    Loads CHARTCAP_* variables from a .env file and sets the error output
    mode. Variables already present in the environment win over the file.

    Args:
        env_file_path (str, optional): Path to the .env file. If None, searches for
            .env in the current directory and parent directories.
        verbose (bool): If True, show full exception tracebacks. If False (default),
            show only `Type: message`.

    Returns:
        bool: True if a .env file was found and loaded, False otherwise.
    """
    _config["verbose"] = verbose
    sys.excepthook = _exception_handler
    return _load_env_file(env_file_path)


def load_cap_config(
    env_file_path: Optional[str] = None,
    prefix: str = 'CHARTCAP_',
) -> CapConfig:
    """
    Build a CapConfig from a .env file and the process environment.

    A missing .env file is not an error; unset variables keep the
    CapConfig defaults (unbounded, front, "Others").

    Args:
        env_file_path (str, optional): Path to the .env file, searched for when None
        prefix (str): Variable prefix, e.g. 'SALES_' reads SALES_CAP

    Returns:
        CapConfig: Fresh configuration for one chart

    Raises:
        ValueError: If a variable holds an unparseable value

    Example:
        config = chartcap.load_cap_config('charts.env')
        chart = CategoryChart(source, dimension='country', config=config)
    """
    _load_env_file(env_file_path)
    return CapConfig.from_env(prefix=prefix)
