"""
bscdev command-line interface

Runs one named task against the resolved project configuration.

Usage:
    # Print the signer addresses of the default network
    bscdev accounts

    # Same, for the BSC test network
    bscdev --network testnet accounts

    # Show the resolved configuration with secrets redacted
    bscdev config
"""

import argparse
import asyncio
from typing import Optional, Sequence

import structlog

from .config.loader import ConfigLoader
from .errors import ConfigurationError, TaskError
from .logging import configure_logging
from .tasks import TaskContext, default_registry, run_task

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    task_help = "\n".join(f"  {t.name:<12} {t.description}" for t in default_registry)

    parser = argparse.ArgumentParser(
        prog="bscdev",
        description="BSC smart-contract development environment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Tasks:\n{task_help}",
    )

    parser.add_argument(
        "task",
        choices=default_registry.names(),
        metavar="TASK",
        help="Task to run"
    )

    parser.add_argument(
        "--network", "-n",
        type=str,
        default=None,
        help="Network to run against (default: the configured default_network)"
    )

    parser.add_argument(
        "--config-dir",
        type=str,
        default=None,
        help="Project directory holding bscdev.yaml and secrets.json (default: cwd)"
    )

    parser.add_argument(
        "--secrets",
        type=str,
        default=None,
        help="Path to the secrets file (default: <config-dir>/secrets.json)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)"
    )

    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit logs as JSON"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    configure_logging(level=args.log_level, format_json=args.log_json)

    try:
        loader = ConfigLoader.create(config_dir=args.config_dir, secrets_path=args.secrets)
        config = loader.load()
        network = config.get_network(args.network)

        asyncio.run(run_task(args.task, TaskContext(config=config, network=network)))

    except (ConfigurationError, TaskError) as e:
        logger.error(
            "Task failed",
            task=args.task,
            network=args.network,
            error_type=type(e).__name__,
            error=str(e),
        )
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
