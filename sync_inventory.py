import argparse
import logging
from pathlib import Path

from inventory_sync import data_handler, renderer, settings, utils
from inventory_sync.logger import setup_logger
from inventory_sync.reconciler import summarize_report
from inventory_sync.synchronizer import InventorySynchronizer

logger = logging.getLogger("inventory_sync")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compare the published inventory with the warehouse inventory and report variances."
    )
    parser.add_argument(
        "--primary",
        type=Path,
        default=settings.INPUT_DIR / settings.PRIMARY_FILENAME,
        help="CSV of the published (website) inventory",
    )
    parser.add_argument(
        "--authoritative",
        type=Path,
        default=settings.INPUT_DIR / settings.AUTHORITATIVE_FILENAME,
        help="CSV of the warehouse inventory (source of truth)",
    )
    parser.add_argument("--output-dir", type=Path, default=settings.OUTPUT_DIR, help="Where outputs are written")
    parser.add_argument("--strict", action="store_true", default=settings.STRICT_MODE, help="Fail on malformed rows")
    parser.add_argument("--demo", action="store_true", help="Write the sample inventories before running")
    parser.add_argument("--no-html", action="store_true", help="Skip the HTML report")
    parser.add_argument("--test-mode", action="store_true", help="Skip the webhook post")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level")
    return parser.parse_args(argv)


def run_process(args: argparse.Namespace) -> int:
    """Main orchestration function: synchronize, then publish the outputs."""
    if args.demo:
        args.primary, args.authoritative = utils.write_sample_inventories(args.primary.parent)
        logger.info(f"🧪 Demo data written to {args.primary.parent}")

    synchronizer = InventorySynchronizer(args.primary, args.authoritative, strict=args.strict)
    succeeded = synchronizer.synchronize()

    report = synchronizer.get_report()
    inventory = synchronizer.get_synchronized_inventory()

    if not args.no_html:
        document = renderer.render_html(
            report,
            inventory,
            succeeded=succeeded,
            primary_label=args.primary.name,
            authoritative_label=args.authoritative.name,
        )
        data_handler.save_html(document, args.output_dir)

    if not succeeded:
        logger.error("❌ Synchronization failed. No report was produced.")
        return 1

    data_handler.save_outputs(report, inventory, args.output_dir)

    if not args.test_mode:
        data_handler.post_to_webhook(report, summarize_report(report))
    else:
        logger.info("🧪 Test Mode: Skipping webhook post.")

    logger.info("\n--- Process Finished Successfully ---")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logger("inventory_sync", args.log_level.upper())
    return run_process(args)


if __name__ == "__main__":
    raise SystemExit(main())
