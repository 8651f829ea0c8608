"""`ocenv` command implementation."""

import argparse
import logging
import sys

from ocenv import __version__
from ocenv.config import load_config
from ocenv.credentials import print_kubeconfig_export
from ocenv.env import EnvOptions, build_environment, run
from ocenv.errors import OcenvError
from ocenv.workspace import delete

PASSWORD_CLI_WARNING = (
    "Warning: --password may leak via shell history and process lists. "
    "Omit it to be prompted by `oc login` instead."
)


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the env command."""
    parser = argparse.ArgumentParser(
        prog="ocenv",
        description="Create an isolated shell environment to interact with a cluster",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("alias", nargs="?", help="Environment alias (defaults to the cluster id)")
    parser.add_argument("-c", "--cluster-id", help="Cluster ID to log into with a token")
    parser.add_argument("-e", "--external-id", help="External cluster ID")
    parser.add_argument("-b", "--base-domain", help="Cluster base domain")
    parser.add_argument("-u", "--username", help="Username for individual cluster login")
    parser.add_argument(
        "-p",
        "--password",
        help="Password for individual cluster login (not recommended)",
    )
    parser.add_argument("-a", "--api", dest="url", help="API URL for individual cluster login")
    parser.add_argument("--kubeconfig", help="Kubeconfig to copy into the environment")
    parser.add_argument("-r", "--reset", action="store_true", help="Reset the environment")
    parser.add_argument("-t", "--temp", action="store_true", help="Delete the environment on exit")
    action_group = parser.add_mutually_exclusive_group()
    action_group.add_argument("-d", "--delete", action="store_true", help="Delete the environment")
    action_group.add_argument(
        "-k",
        "--export-kubeconfig",
        action="store_true",
        help="Print an export statement to use the environment kubeconfig elsewhere",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Create, enter, print or delete an environment."""
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    if not (args.alias or args.cluster_id or args.url):
        parser.print_usage(sys.stderr)
        print("Error: an alias, --cluster-id or --api is required", file=sys.stderr)
        return 2
    if args.password is not None:
        print(PASSWORD_CLI_WARNING, file=sys.stderr)

    options = EnvOptions(
        alias=args.alias,
        cluster_id=args.cluster_id,
        external_id=args.external_id,
        base_domain=args.base_domain,
        username=args.username,
        password=args.password,
        url=args.url,
        kubeconfig=args.kubeconfig,
        reset=args.reset,
        temporary=args.temp,
    )

    try:
        config = load_config()
        env = build_environment(options, config)
        if args.delete:
            delete(env.path)
            return 0
        if args.export_kubeconfig:
            print_kubeconfig_export(env)
            return 0
        run(env, shell=config.shell)
    except (OcenvError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
