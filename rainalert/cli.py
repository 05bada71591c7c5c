"""CLI entry point for the rain alert check."""

import argparse
import logging

from rainalert.config.loader import ConfigError, load_config
from rainalert.pipeline.check_pipeline import RainCheckPipeline

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rainalert",
        description="Email and publish an alert when rain is forecast",
    )
    parser.add_argument("--policy", help="Policy overrides YAML path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # check
    check_p = sub.add_parser("check", help="Run one rain check")
    check_p.add_argument(
        "--dry-run", action="store_true", help="Evaluate without notifying"
    )

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(policy_path=args.policy)
    except ConfigError as e:
        logger.critical("%s", e)
        return 2

    if args.command == "check":
        return _cmd_check(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_check(config, args) -> int:
    pipeline = RainCheckPipeline.from_config(config)
    try:
        summary = pipeline.run(dry_run=args.dry_run)
    except Exception:
        logger.exception("Rain check failed")
        return 1

    print(f"Window: {summary.window_start} -> {summary.window_end} ({summary.timezone})")
    print(f"Hours evaluated: {summary.hours_evaluated} | Rainy hours: {len(summary.rain_events)}")
    if summary.message:
        print(summary.message)
    if summary.dry_run and summary.rain_events:
        print("Dry run: no notification sent")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.redacted().model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
