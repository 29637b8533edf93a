"""Configuration and command-line argument parsing"""

import argparse
from typing import Dict, List, Optional

from .constants import DEFAULT_CONFIG

_PRIMARY_ONLY_CHOICES = {'auto': None, 'on': True, 'off': False}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='foresight',
        description="Foresight - show the overview automatically on empty workspaces",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                           # Follow GNOME settings
  %(prog)s --no-animations           # Show the overview right after a window closes
  %(prog)s --primary-only on         # Ignore windows on secondary monitors
  %(prog)s --list                    # Show how current windows are classified
        """)

    # Behavior
    parser.add_argument(
        '--no-animations', action='store_true',
        help='Do not wait for close animations (default: follow enable-animations)')
    parser.add_argument(
        '--primary-only', choices=sorted(_PRIMARY_ONLY_CHOICES), default='auto',
        help='Only count windows on the primary monitor (default: auto = follow '
             'org.gnome.mutter workspaces-only-on-primary)')

    # Utilities
    parser.add_argument(
        '--list', action='store_true',
        help='List windows on the active workspace with their classification and exit')

    # Logging
    parser.add_argument(
        '--debug', action='store_true',
        help='Enable debug logging')
    parser.add_argument(
        '--verbose', action='store_true',
        help='Enable verbose logging')

    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    return build_parser().parse_args(argv)


def args_to_config(args: argparse.Namespace) -> Dict:
    """Convert parsed arguments to configuration dictionary

    Args:
        args: Parsed command-line arguments

    Returns:
        Configuration dictionary
    """
    config = dict(DEFAULT_CONFIG)
    config.update({
        'debug': args.debug,
        'verbose': args.verbose,
        'list': args.list,
        'animations': False if args.no_animations else None,
        'primary_only': _PRIMARY_ONLY_CHOICES[args.primary_only],
    })
    return config
