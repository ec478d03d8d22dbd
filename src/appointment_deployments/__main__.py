"""Command line entry point: python -m appointment_deployments."""

import argparse
import logging
import sys
from typing import List, Optional

from .constants import NETWORK_CONFIG
from .exceptions import DeploymentError
from .runner import deploy_all

logger = logging.getLogger("appointment_deployments")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appointment-deployments",
        description="Deploy ProviderRegistry and AppointmentScheduler",
    )
    parser.add_argument("--network", default="localhost", choices=sorted(NETWORK_CONFIG))
    parser.add_argument("--tags", nargs="+", help="only run deploy scripts with these tags")
    parser.add_argument("--rpc-url", help="override the network's RPC URL")
    parser.add_argument("--deployments-dir", help="deployment record directory")
    parser.add_argument("--artifacts-dir", help="compiled artifacts directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="log RPC traffic")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        records = deploy_all(
            args.network,
            tags=args.tags,
            rpc_url=args.rpc_url,
            deployments_dir=args.deployments_dir,
            artifacts_dir=args.artifacts_dir,
        )
    except (DeploymentError, ValueError) as e:
        logger.error("Deployment aborted: %s", e)
        return 1

    for record in records:
        print(f"{record.name}: {record.address}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
