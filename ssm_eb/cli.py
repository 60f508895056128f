#!/usr/bin/env python3
"""
Command Line Interface for the SSM to Elastic Beanstalk utility

Get mode renders parameter store values as option settings; set mode
writes component parameters back to the store.
"""

import argparse
import sys
from typing import List, Optional

from .common import format_settings_banner
from .config_loader import load_parameters
from .errors import ConfigError, RemoteError, SsmEbError
from .executor import MODES, run
from .store import ParameterStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ssm-eb",
        description="Render SSM parameters as Elastic Beanstalk option settings, or store them"
    )
    parser.add_argument("--input", "-i", required=True,
                        help="Input file listing component and external parameters")
    parser.add_argument("--output", "-o", default="",
                        help="Destination of the resulting option settings (default: stdout)")
    parser.add_argument("--environment", "-e", default="",
                        help="Environment name used as prefix for the parameter paths")
    parser.add_argument("--mode", "-m", default="get", choices=MODES,
                        help="Get values from the store or set them (default: get)")
    parser.add_argument("--profile", "-p",
                        help="AWS profile to use (default: boto3 resolution)")
    parser.add_argument("--region", "-r",
                        help="AWS region to use (default: boto3 resolution)")
    return parser


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parsed_args = build_parser().parse_args(args)

    print(format_settings_banner({
        "input": parsed_args.input,
        "output": parsed_args.output,
        "environment": parsed_args.environment,
        "mode": parsed_args.mode,
    }), file=sys.stderr)

    try:
        parameters = load_parameters(parsed_args.input, parsed_args.environment)
    except ConfigError as e:
        print(f"Error reading file `{parsed_args.input}`: {e}", file=sys.stderr)
        return 1

    try:
        store = ParameterStore.from_session(parsed_args.profile, parsed_args.region)
        run(parsed_args.mode, store, parameters, parsed_args.output)
    except RemoteError as e:
        action = "getting" if parsed_args.mode == "get" else "setting"
        print(f"Error {action} values: {e}", file=sys.stderr)
        return 1
    except SsmEbError as e:
        print(str(e), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
