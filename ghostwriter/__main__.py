"""
Ghostwriter Main Entry Point

Drive the client against a running service from the command line.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from ghostwriter.core.config import load_config
from ghostwriter.core.constants import PROJECT_NAME, VERSION
from ghostwriter.core.exceptions import ConfigurationError
from ghostwriter.core.logging_config import LogLevel, setup_logging, get_logger
from ghostwriter.flows.base import FlowStatus
from ghostwriter.flows.controller import GhostwriterController
from ghostwriter.ui.notification_manager import Notification, NotificationType
from ghostwriter.render.pipeline import UIModel


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghostwriter",
        description="Ghostwriter - analyze a story and preview continuation paths"
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", "-t", type=str, help="Story text to analyze")
    source.add_argument("--file", "-f", type=str, help="Upload a .pdf or .txt file and analyze its text")

    parser.add_argument("--context", type=str, default="", help="Long-context text (defaults to the story)")
    parser.add_argument("--memory", type=str, default="", help="Short-memory notes")
    parser.add_argument(
        "--preview", "-p",
        type=int,
        action="append",
        default=[],
        metavar="N",
        help="Preview direction N (1-based); repeat to preview several concurrently"
    )
    parser.add_argument("--config", "-c", type=str, help="Path to a JSON configuration file")
    parser.add_argument("--base-url", type=str, help="Override the service base URL")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose log format")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"{PROJECT_NAME} {VERSION}")
    return parser


def print_toast(notification: Notification) -> None:
    marker = {
        NotificationType.SUCCESS: "✓",
        NotificationType.WARNING: "!",
        NotificationType.ERROR: "✗",
    }.get(notification.notification_type, "•")
    print(f"[{marker}] {notification.message}", file=sys.stderr)


def print_results(model: UIModel) -> None:
    for badge in model.badges:
        print(f"{badge.label}: {badge.value}")
    if model.entities:
        print("Entities: " + ", ".join(entity.text for entity in model.entities))
    if model.bridge_visible:
        print(f"\n{model.bridge}")
    print()
    for card in model.directions:
        print(f"  {card.number}. {card.name}")
        if card.description:
            print(f"     {card.description}")


async def run_cli(args: argparse.Namespace, controller: GhostwriterController) -> int:
    logger = get_logger("main")
    view = controller.view
    view.notifications.add_listener(print_toast)

    if args.file:
        result = await controller.select_file(args.file)
        if result.status != FlowStatus.COMPLETED:
            return 1
    else:
        controller.edit_main_text(args.text)
    controller.edit_long_context(args.context)
    controller.edit_short_memory(args.memory)

    result = await controller.click_analyze()
    if not result.success:
        logger.error(f"Analysis did not complete ({result.status.value})")
        return 1
    print_results(result.value)

    if args.preview:
        previews = await asyncio.gather(
            *(controller.click_direction(number - 1) for number in args.preview)
        )
        for number, preview in zip(args.preview, previews):
            if preview.status == FlowStatus.SKIPPED:
                print(f"\nNo direction {number}", file=sys.stderr)
                continue
            print(f"\n--- Direction {number} ---")
            print(preview.value)
    return 0


async def _main_async(args: argparse.Namespace, settings) -> int:
    async with GhostwriterController(settings) as controller:
        return await run_cli(args, controller)


def main(argv=None) -> int:
    """Main entry point for the Ghostwriter client."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_config(Path(args.config) if args.config else None)
    except ConfigurationError as e:
        print(f"Could not load config: {e}", file=sys.stderr)
        return 2
    if args.base_url:
        settings = settings.model_copy(update={"base_url": args.base_url.rstrip("/")})

    log_level = LogLevel.DEBUG if args.debug else LogLevel.from_name(settings.log_level)
    setup_logging(level=log_level, verbose=args.verbose or settings.verbose_logging)
    logger = get_logger("main")

    logger.info(f"Using service at {settings.base_url}")
    return asyncio.run(_main_async(args, settings))


if __name__ == "__main__":
    sys.exit(main())
