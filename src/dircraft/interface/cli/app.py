from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution (defaults or persisted session, then CLI overrides), build
execution from a file or inline text, and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from dircraft.core.pipeline.engine import run_build, run_build_from_file
from dircraft.core.pipeline.validator import validate_config
from dircraft.domain.config import get_default_config, load_config
from dircraft.domain.plan_models import BuildResult
from dircraft.infra.logging import LoggingConfig, configure_logging, get_logger
from dircraft.interface.cli import args as cli_args
from dircraft.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (direct stderr so prompts and progress stay ordered)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, use_queue=False))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Resolve base configuration (GUI build switches are never inherited)
    base_conf = get_default_config() if args.use_defaults else _session_for_cli(load_config())

    # 4. Merge overrides and validate
    overrides = cli_args.args_to_overrides(args)
    clean_conf, warnings = validate_config(_merge_config(base_conf, overrides), strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 5. Input source resolution
    if not args.file_path and not args.direct_structure:
        logger.error(i18n.t("cli.errors.no_input"))
        parser.print_help(sys.stderr)
        return 1

    if args.file_path and args.direct_structure:
        logger.warning(i18n.t("cli.errors.conflicting_input"))

    options: Dict[str, Any] = {
        "skip_confirmation": clean_conf["skip_confirmation"],
        "dry_run": clean_conf["dry_run"],
    }
    output_dir = clean_conf["output_dir"]

    # 6. Build execution phase
    try:
        if args.direct_structure:
            result = run_build(args.direct_structure, output_dir, **options)
        else:
            result = run_build_from_file(args.file_path, output_dir, **options)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        return 130

    # 7. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

# Destination and safety switches belong to the GUI session; the CLI only
# takes them from its own flags
_CLI_ONLY_KEYS = ("output_dir", "skip_confirmation", "dry_run")


def _session_for_cli(session: Dict[str, Any]) -> Dict[str, Any]:
    """Reset the CLI-only keys of a persisted session to their defaults."""
    defaults = get_default_config()
    out = dict(session)
    for key in _CLI_ONLY_KEYS:
        out[key] = defaults[key]
    return out


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None overrides into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in _CLI_ONLY_KEYS:
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: BuildResult) -> None:
    """
    Print the final status line of a build.

    Args:
        result: The build result to render.
    """
    if not result.ok:
        if not result.cancelled:
            print(f"ERROR: {i18n.t('cli.errors.build_fail', error=result.error)}", file=sys.stderr)
        return

    if result.dry_run:
        print(i18n.t("cli.status.dry_run"))
        return

    print(i18n.t(
        "cli.status.created",
        dirs=len(result.directories),
        files=len(result.files),
        path=result.output_dir,
    ))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
