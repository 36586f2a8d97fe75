"""Entry point for cluster-platform."""

import argparse
import logging
import sys
from typing import Any

from pydantic import ValidationError

from cluster_platform import __version__
from cluster_platform.config import LogLevel, PlatformConfig, ResolverMode
from cluster_platform.utils.errors import ConfigurationError, PlatformError


def setup_logging(level: LogLevel) -> None:
    """Configure logging to stderr."""
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="cluster-platform",
        description="Print the platform type of an OpenShift cluster",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "kubeconfig",
        nargs="?",
        default=None,
        help="Path to kubeconfig file (default: KUBECONFIG, in-cluster, ~/.kube/config)",
    )
    parser.add_argument(
        "--context",
        default=None,
        help="Kubeconfig context to use",
    )

    parser.add_argument(
        "--mode",
        choices=["api", "cli"],
        default=None,
        help="Resolve via the management API or the oc/kubectl CLI (default: api)",
    )
    parser.add_argument(
        "--cli-path",
        default=None,
        help="oc or kubectl binary for cli mode (default: search PATH)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: WARNING)",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> PlatformConfig:
    """Build settings from args, falling back to environment/defaults."""
    config_kwargs: dict[str, Any] = {}

    if args.kubeconfig:
        config_kwargs["kubeconfig_path"] = args.kubeconfig

    if args.context:
        config_kwargs["kubeconfig_context"] = args.context

    if args.mode:
        config_kwargs["mode"] = ResolverMode(args.mode)

    if args.cli_path:
        config_kwargs["cli_path"] = args.cli_path

    if args.log_level:
        config_kwargs["log_level"] = LogLevel(args.log_level)

    try:
        return PlatformConfig(**config_kwargs)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "settings"
        raise ConfigurationError(
            f"Invalid configuration: {field}: {first['msg']}", cause=e
        ) from e


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = build_config(args)
    except ConfigurationError as e:
        print(e.message, file=sys.stderr)
        return 1

    setup_logging(config.log_level)
    logger = logging.getLogger(__name__)

    from cluster_platform.resolvers import create_resolver

    resolver = create_resolver(config)
    logger.debug(f"cluster-platform v{__version__} using the {resolver.name} resolver")

    try:
        platform_type = resolver.resolve()
    except PlatformError as e:
        logger.debug("Platform type resolution failed", exc_info=True)
        print(e.message, file=sys.stderr)
        return 1

    print(platform_type)
    return 0


if __name__ == "__main__":
    sys.exit(main())
