import argparse
import logging
import os
import sys

from .backup_utils import create_backup, manage_backups
from .check import check_vault, print_check_report
from .config import bindings_from_args, load_bindings_file, load_settings
from .convert import convert_vault
from .hierarchy import ConfigurationError


def parse_args(argv=None, settings=None):
    parser = argparse.ArgumentParser(prog="dendron2logseq", description="Convert Dendron vaults to Logseq graphs")
    parser.add_argument("-V", "--vault", dest="vaults", nargs=3, action="append",
                        metavar=("SOURCE", "DEST", "JOURNAL"),
                        help="Dendron vault, Logseq graph and journal hierarchy ('-' for none); repeat for multiple vaults")
    parser.add_argument("-c", "--config", default=settings.config_file if settings else None,
                        help="YAML file with a 'vaults' list")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", default=settings.log_file if settings else None,
                        help="Log file (overwritten on each run)")

    subparsers = parser.add_subparsers(dest="action", required=True)
    subparsers.add_parser("check", help="Pre-check: duplicate titles, destination collisions, odd names")

    convert = subparsers.add_parser("convert", help="Do conversion")
    convert.add_argument("-r", "--remove-titles", action="store_true", help="Strip title attributes from frontmatter")
    convert.add_argument("--dry-run", action="store_true", help="Show where notes would go, write nothing")
    convert.add_argument("--backup-dir", default=settings.backup_dir if settings else None,
                         help="Archive existing graphs here before converting")
    convert.add_argument("--max-backups", type=int, default=5, help="Backups to keep per graph (default: 5)")

    return parser.parse_args(argv)


def setup_logging(log_file=None, debug=False):
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file, encoding='utf-8', mode='w', delay=True))
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )
    logging.getLogger().setLevel(level)


def run_check(binding, args):
    report = check_vault(binding)
    print_check_report(report)
    return not report.errors


def run_convert(binding, args):
    if args.backup_dir and not args.dry_run and os.path.isdir(binding.destination_root):
        if create_backup(binding.destination_root, args.backup_dir) is None:
            logging.error(f"Backup of {binding.destination_root} failed, not converting into it")
            return False
        manage_backups(args.backup_dir, binding.destination_root, args.max_backups)

    summary = convert_vault(binding, remove_titles=args.remove_titles, dry_run=args.dry_run)
    print(f"processed {summary.processed} files")
    if not args.dry_run:
        print(f"  Journals copied: {summary.journals}")
        print(f"  Pages copied: {summary.pages}")
    if summary.skipped_collisions:
        print(f"  Skipped (destination already claimed): {summary.skipped_collisions}")
    if summary.errors:
        print(f"  Errors: {summary.errors}")
    return summary.ok


def main(argv=None):
    settings = load_settings()
    args = parse_args(argv, settings)
    setup_logging(args.log_file, args.debug)

    invalid = 0
    try:
        vaults = bindings_from_args(args.vaults)
        if args.config:
            from_file, invalid = load_bindings_file(args.config)
            vaults.extend(from_file)
    except ConfigurationError as e:
        logging.error(str(e))
        return 2
    if not vaults and not invalid:
        logging.error("No vaults configured. Use -V SOURCE DEST JOURNAL or --config.")
        return 2

    action = run_check if args.action == "check" else run_convert
    failed = invalid
    for vault in vaults:
        logging.info(f"processing vault {vault.source_root} to graph {vault.destination_root}")
        try:
            if not action(vault, args):
                failed += 1
        except (ConfigurationError, OSError) as e:
            logging.error(f"Vault {vault.source_root} aborted: {e}")
            failed += 1

    if failed:
        logging.warning(f"{failed} of {len(vaults) + invalid} vaults had problems")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
