from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Provides logic to translate raw argparse
namespaces into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict

from wordtally.utils.i18n import i18n

# Sentinel used when --log-file is given without a path
DEFAULT_LOG_SENTINEL = "@default"

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the WordTally CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="wordtally",
        description=i18n.t("app.description"),
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help=i18n.t("cli.args.input"),
    )
    p.add_argument(
        "--encoding",
        default=None,
        help=i18n.t("cli.args.encoding"),
    )

    # --- Reporting ---
    p.add_argument(
        "-n", "--top",
        dest="top_n",
        type=int,
        default=None,
        help=i18n.t("cli.args.top"),
    )
    p.add_argument(
        "--alphabetical",
        action="store_true",
        help=i18n.t("cli.args.alphabetical"),
    )
    p.add_argument(
        "--no-sentence",
        action="store_true",
        help=i18n.t("cli.args.no_sentence"),
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help=i18n.t("cli.args.config"),
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help=i18n.t("cli.args.save_config"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--log-file",
        nargs="?",
        const=DEFAULT_LOG_SENTINEL,
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a domain configuration dictionary.

    Values left at None are meant to be skipped by the merge step.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "encoding": args.encoding,
        "top_n": args.top_n,
    }

    if args.alphabetical:
        overrides["sort_alphabetically"] = True
    if args.no_sentence:
        overrides["show_sentence"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"
    if args.log_file and args.log_file != DEFAULT_LOG_SENTINEL:
        overrides["log_file"] = args.log_file

    return overrides
