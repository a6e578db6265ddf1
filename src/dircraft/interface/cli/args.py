from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (help texts, flags, defaults) and
translates the parsed namespace into session configuration overrides.
"""

import argparse
from typing import Any, Dict

from dircraft import __version__
from dircraft.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the DirCraft CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dircraft",
        description=i18n.t("app.description"),
        epilog=i18n.t("app.epilog", default=""),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # --- Structure Source ---
    p.add_argument(
        "file_path",
        nargs="?",
        default=None,
        help=i18n.t("cli.args.file"),
    )
    p.add_argument(
        "-s", "--structure",
        dest="direct_structure",
        default=None,
        help=i18n.t("cli.args.structure"),
    )

    # --- Destination and Safety ---
    p.add_argument(
        "-o", "--output",
        dest="output_dir",
        default=None,
        help=i18n.t("cli.args.output"),
    )
    p.add_argument(
        "-y", "--yes",
        dest="skip_confirmation",
        action="store_true",
        help=i18n.t("cli.args.yes"),
    )
    p.add_argument(
        "-d", "--dry-run",
        action="store_true",
        help=i18n.t("cli.args.dry_run"),
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into session configuration overrides.

    Flags left at their defaults map to None so they do not clobber the
    persisted session during the merge.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "output_dir": args.output_dir,
        "skip_confirmation": None,
        "dry_run": None,
    }

    if args.skip_confirmation:
        overrides["skip_confirmation"] = True
    if args.dry_run:
        overrides["dry_run"] = True

    return overrides
