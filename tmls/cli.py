"""Command-line interface for tmls."""

import logging
import sys
import click
from typing import Any, Dict, Optional, Tuple

from .core.errors import TmlsError
from .core.history import SnapshotHistory
from .core.models import ListingConfig, ResolvedLocation
from .config.config_manager import ConfigManager
from .utils.environment import short_hostname, working_directory
from .utils.formatters import terminal_width


def setup_logging(level: str, log_file: Optional[str] = None):
    """Set up logging configuration.

    Log records go to standard error so they never mix with the listing.
    """
    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    # Create formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Set up root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Add console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Add file handler if specified
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            click.echo(f"Warning: Could not set up file logging: {e}", err=True)


def build_listing_config(locations: Tuple[str, ...], options: Dict[str, Any],
                         file_config: Dict[str, Any], cwd: str, hostname: str,
                         width: int) -> ListingConfig:
    """Merge command-line options over the configuration file.

    Args:
        locations: Locations given on the command line.
        options: Command-line option values, None or False when not given.
        file_config: Loaded configuration with defaults applied.
        cwd: Working directory relative locations are resolved against.
        hostname: Short host name used when no computer name is given.
        width: Terminal width used unless a single column is requested.

    Returns:
        Resolved listing configuration.
    """
    listing = file_config.get('listing', {})
    backups = file_config.get('backups', {})

    resolved = [ResolvedLocation.resolve(location, cwd) for location in locations]
    if not resolved:
        resolved = [ResolvedLocation.resolve(cwd, cwd)]

    single_column = options.get('single_column') or listing.get('single_column', False)

    # An empty name given on the command line still overrides the file
    computer_name = options.get('computer')
    if computer_name is None:
        computer_name = listing.get('computer')
    if computer_name is None:
        computer_name = hostname

    disk_name = options.get('disk')
    if disk_name is None:
        disk_name = listing.get('disk')

    return ListingConfig(
        locations=resolved,
        computer_name=computer_name,
        forced_disk_name=disk_name,
        match_disk=bool(options.get('match_disk') or listing.get('match_disk')),
        verbose=bool(options.get('verbose') or listing.get('verbose')),
        include_hidden=bool(options.get('all') or listing.get('all')),
        column_width=0 if single_column else width,
        mount_root=backups['mount_root'],
        store_name=backups['store_name'],
    )


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.option('--all', '-a', 'all_', is_flag=True,
              help='Display hidden files.')
@click.option('--computer', '-c', metavar='ComputerName',
              help='Name of the computer.')
@click.option('--disk', '-d', metavar='DiskName',
              help='Name of the backed up disk to use.')
@click.option('-l', 'single_column', is_flag=True,
              help='Display the results in a single column.')
@click.option('--match-disk', '-m', is_flag=True,
              help='Use the disk name of the mounted volume holding each location.')
@click.option('--verbose', '-v', is_flag=True,
              help='Display computer name and disk name before listing files.')
@click.option('--config', 'config_path',
              help='Path to configuration file')
@click.option('--log-level',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.option('--log-file',
              help='Log file path')
@click.argument('locations', nargs=-1, metavar='[LOCATION]...')
def cli(all_: bool, computer: Optional[str], disk: Optional[str], single_column: bool,
        match_disk: bool, verbose: bool, config_path: Optional[str], log_level: Optional[str],
        log_file: Optional[str], locations: Tuple[str, ...]):
    """List the contents of LOCATION in every Time Machine backup.

    Only snapshots where the contents changed are shown. LOCATION defaults
    to the current directory.
    """
    try:
        config_manager = ConfigManager(config_path)
        file_config = config_manager.load_config()
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    logging_config = config_manager.get_logging_config()
    setup_logging(log_level or logging_config['level'], log_file or logging_config['file'])

    options = {
        'all': all_,
        'computer': computer,
        'disk': disk,
        'single_column': single_column,
        'match_disk': match_disk,
        'verbose': verbose,
    }
    config = build_listing_config(locations, options, file_config,
                                  working_directory(), short_hostname(), terminal_width())

    try:
        SnapshotHistory(config).report()
    except TmlsError as e:
        click.echo(f"An error occurred: {e}", err=True)
        sys.exit(1)


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
