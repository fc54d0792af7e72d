"""
Package information utility.

This module provides the ``proxygen-info`` command: it reports the
installation and active configuration and, given ``module:Class``,
shows the proxy that would be generated for that class.
"""

import argparse
import importlib
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict, List, Optional

import proxygen

from .config import get_config


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "Not installed"


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to proxygen.

    Returns:
        Dictionary containing system information
    """
    return {
        'python_version': sys.version,
        'platform': platform.platform(),
        'architecture': platform.architecture(),
        'jinja2_version': _distribution_version("Jinja2"),
        'yaml_version': _distribution_version("PyYAML"),
    }


def get_proxygen_info() -> Dict[str, Any]:
    """
    Get proxygen-specific information.

    Returns:
        Dictionary containing version and configuration details
    """
    config = get_config()
    return {
        'version': proxygen.__version__,
        'author': proxygen.__author__,
        'config_file': str(config.config_file) if config.config_file else None,
        'config': config.to_dict(),
    }


def load_class(target: str) -> type:
    """
    Import the class named by ``module:Class``.

    Raises:
        ValueError: If ``target`` is malformed or does not name a class
    """
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise ValueError(f"Expected 'module:Class', got '{target}'")

    obj: Any = importlib.import_module(module_name)
    for part in attribute.split("."):
        obj = getattr(obj, part)

    if not isinstance(obj, type):
        raise ValueError(f"'{target}' is not a class")
    return obj


def print_info() -> None:
    """Print formatted information about proxygen and the system."""
    print("proxygen: Proxy Class Generator")
    print("=" * 40)

    proxygen_info = get_proxygen_info()
    print(f"\nproxygen Version: {proxygen_info['version']}")
    print(f"Author: {proxygen_info['author']}")
    print(f"Config File: {proxygen_info['config_file'] or 'defaults'}")

    config = proxygen_info['config']
    print(f"Proxy Prefix: {config['naming']['prefix']}")
    print(f"Interception Prefix: {config['generation']['interception_prefix']}")
    print(f"Lazy Prefix: {config['generation']['lazy_prefix']}")
    print(f"Log Level: {config['logging']['level']}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")
    print(f"Architecture: {system_info['architecture'][0]}")
    print(f"Jinja2 Version: {system_info['jinja2_version']}")
    print(f"PyYAML Version: {system_info['yaml_version']}")


def print_proxy(target: str) -> None:
    """Print the generated name and interception proxy source for ``module:Class``."""
    from ..proxy import Enhancer, InterceptionGenerator

    enhancer = Enhancer(load_class(target), generators=[InterceptionGenerator()])
    print(f"Proxy Class: {enhancer.get_class_name()}")
    print("-" * 40)
    print(enhancer.generate_class(), end="")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the proxygen-info command."""
    parser = argparse.ArgumentParser(
        prog="proxygen-info",
        description="Show proxygen installation details or the proxy generated for a class.",
    )
    parser.add_argument("target", nargs="?", help="class to proxy, as module:Class")
    args = parser.parse_args(argv)

    try:
        if args.target:
            print_proxy(args.target)
        else:
            print_info()
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
