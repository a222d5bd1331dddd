"""
Shared helpers for the query collector command-line interfaces.
"""
import argparse
from typing import Optional


def build_env_parser(description: Optional[str] = None) -> argparse.ArgumentParser:
    """
    Create an ArgumentParser with the common --config-dir and --env options.

    Args:
        description: Optional parser description shown in CLI help.

    Returns:
        argparse.ArgumentParser: parser preconfigured with the shared arguments.
    """
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--config-dir",
        type=str,
        default=None,
        help="Directory holding config.yaml. Built-in defaults are used when omitted.",
    )
    parser.add_argument(
        "--env",
        type=str,
        default=None,
        help=(
            "Environment name for configuration override (e.g., 'dev', 'prod'). "
            "Loads config_<env>.yaml in addition to the base config.yaml."
        ),
    )
    return parser
