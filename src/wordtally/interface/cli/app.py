from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: loading and merging of configuration sources
(defaults, persisted JSON, and CLI overrides), logging bootstrap, input path
collection, analysis execution, and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional, TextIO

from wordtally.core.pipeline.engine import run_analysis
from wordtally.core.pipeline.stages.validator import validate_config
from wordtally.domain.config import load_config, save_config
from wordtally.domain.models import AnalysisResult
from wordtally.infra.fs import normalize_path
from wordtally.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from wordtally.interface.cli import args as cli_args
from wordtally.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        stdin: Stream used to prompt for the input path. Defaults to sys.stdin.

    Returns:
        int: Process exit code (0 success, 1 analysis failure, 2 bad input).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # Explicit flags are rejected; persisted values are coerced by the validator
    if args.top_n is not None and args.top_n <= 0:
        print(f"ERROR: {i18n.t('cli.errors.invalid_top', n=args.top_n)}", file=sys.stderr)
        return 2

    # 1. Resolve configuration (persisted or explicit file, then CLI flags)
    base_conf = load_config(args.config_file)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    clean_conf, warnings = validate_config(raw_conf, strict=False)

    if args.log_file == cli_args.DEFAULT_LOG_SENTINEL:
        clean_conf["log_file"] = get_default_log_path()

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"] or None,
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config and save_config(clean_conf, args.config_file):
        print(i18n.t("cli.status.config_saved", path=args.config_file or "user data directory"))

    # 3. Input path collection
    input_path = clean_conf["input_path"] or _prompt_input_path(
        stdin or sys.stdin,
        sys.stderr if args.json_output else sys.stdout,
    )
    if not input_path:
        msg = i18n.t("cli.errors.no_input")
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    if not os.path.isfile(input_path):
        msg = i18n.t("cli.errors.path_not_exist", path=input_path)
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2
    clean_conf["input_path"] = input_path

    # 4. Analysis execution
    try:
        result = run_analysis(clean_conf)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130
    except Exception as e:
        msg = i18n.t("cli.errors.analysis_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    # 5. Output rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, clean_conf)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of override values into the base configuration.

    Only keys already known to the base are merged; None means "not set".
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# INPUT COLLECTION
# -----------------------------------------------------------------------------

def _prompt_input_path(stream: TextIO, out: TextIO) -> str:
    """
    Ask for the input file and read one line from the stream.

    In JSON mode the prompt goes to stderr so stdout holds a single document.
    """
    print(i18n.t("cli.prompt.input_path"), file=out)
    return normalize_path(stream.readline())

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: AnalysisResult, config: Dict[str, Any]) -> None:
    """
    Format and print the analysis result to standard output.

    Failed results print only the error, on stderr.
    """
    if not result.ok:
        print(f"ERROR: {i18n.t('cli.errors.input_unavailable', error=result.error)}", file=sys.stderr)
        return

    if not result.top_words:
        print(i18n.t("cli.status.no_words"))
        print(i18n.t("cli.status.total", total=result.total_words))
        return

    print(i18n.t("cli.status.top_header", n=len(result.top_words)))
    for entry in result.top_words:
        print(i18n.t("cli.status.entry", count=entry.count, word=entry.word))

    print()
    print(i18n.t("cli.status.total", total=result.total_words))

    if result.alphabetical:
        print()
        print(i18n.t("cli.status.alpha_header"))
        for entry in result.alphabetical:
            print(f" {entry.word}")

    if config.get("show_sentence", True):
        print()
        print(i18n.t("cli.status.last_sentence", word=result.top_word, sentence=result.last_sentence))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
