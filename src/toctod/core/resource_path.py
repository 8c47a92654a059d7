"""Resource path resolution for files shipped inside the package.

Configuration files and the bundled airport table live next to the code so
they are found the same way from a source checkout and from an installed
wheel.

Typical usage:
    from toctod.core.resource_path import get_config_path, get_data_path

    logging_config = get_config_path("logging.yaml")
    airports_file = get_data_path("airports.yaml")
"""

from pathlib import Path


def get_package_root() -> Path:
    """Get the root directory of the toctod package.

    Returns:
        Path to the directory containing the package modules.

    Examples:
        >>> get_package_root()
        PosixPath('/Users/user/dev/toctod/src/toctod')
    """
    # Go up from src/toctod/core to src/toctod
    return Path(__file__).parent.parent


def get_resource_path(relative_path: str) -> Path:
    """Get absolute path to a resource file or directory.

    Args:
        relative_path: Relative path from the package root (e.g., "config/logging.yaml")

    Returns:
        Absolute path to the resource.
    """
    return get_package_root() / relative_path


def get_config_path(config_file: str) -> Path:
    """Get path to a configuration file.

    Args:
        config_file: Config filename (e.g., "settings.yaml")

    Returns:
        Absolute path to the config file.

    Examples:
        >>> str(get_config_path("logging.yaml"))
        '/Users/user/dev/toctod/src/toctod/config/logging.yaml'
    """
    return get_resource_path(f"config/{config_file}")


def get_data_path(data_file: str) -> Path:
    """Get path to a data file.

    Args:
        data_file: Data filename (e.g., "airports.yaml")

    Returns:
        Absolute path to the data file.
    """
    return get_resource_path(f"data/{data_file}")
