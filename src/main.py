#!/usr/bin/env python3
"""
main.py - command line entry point for the display test pattern engine
-----------------------------------------------------------------------

Responsible for:
- loading config/defaults.yaml
- wiring EventBus, ConfigStore, PixelSurface and TestSession
- rendering a single frame to PNG (render)
- running the frame scheduler headlessly for a fixed time (run)
- listing tests, burn-in patterns and parameter domains (list)

Examples:
    python src/main.py render gradient --set steps=16 --set direction=diagonal --out gradient.png
    python src/main.py render burn-in-fix --pattern plasma --frames 120 --out plasma.png
    python src/main.py run response-time --seconds 5 --fps 60
"""

import sys

# Set UTF-8 encoding for output (log tree symbols)
if hasattr(sys.stdout, 'reconfigure') and (sys.stdout.encoding or '').lower() != 'utf-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore

import argparse
import asyncio
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from engine.frame_scheduler import FrameScheduler, ManualClock
from engine.pixel_surface import PixelSurface
from managers import ConfigManager
from models.enums import BurnInPatternID, LogCategory, LogLevel, ParamFamily, TestID
from models.errors import ConfigurationError
from services import ConfigStore, EventBus, TestSession
from services import config_validation
from services.middleware import log_middleware
from services.test_session import TEST_FAMILIES
from utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.SYSTEM)


# ---------------------------------------------------------------------------
# ARGUMENT HELPERS
# ---------------------------------------------------------------------------

def parse_assignment(text: str) -> tuple:
    """
    'key=value' -> (key, value); the value is read as YAML so numbers and
    booleans arrive typed. Hex colors are kept as strings.
    """
    key, sep, raw = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"Expected key=value, got {text!r}")
    raw = raw.strip()
    if raw.startswith("#"):
        return key.strip(), raw
    try:
        return key.strip(), yaml.safe_load(raw)
    except yaml.YAMLError:
        return key.strip(), raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="display-test",
        description="Render display test patterns headlessly",
    )
    parser.add_argument("--config", default="config/defaults.yaml", help="YAML defaults (relative to src/)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors in log output")

    sub = parser.add_subparsers(dest="command", required=True)
    tests = [t.value for t in TestID]

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("test", choices=tests)
        p.add_argument("--width", type=int, help="Surface width (default from config)")
        p.add_argument("--height", type=int, help="Surface height (default from config)")
        p.add_argument("--pattern", choices=[b.value for b in BurnInPatternID], help="Burn-in pattern")
        p.add_argument("--set", dest="overrides", action="append", type=parse_assignment, default=[],
                       metavar="KEY=VALUE", help="Override a parameter of the test's family")

    render = sub.add_parser("render", help="Render one frame to PNG")
    add_common(render)
    render.add_argument("--out", required=True, help="Output PNG path")
    render.add_argument("--frames", type=int, default=1, help="Ticks to advance before saving (animated tests)")
    render.add_argument("--frame-ms", type=float, default=1000 / 60, help="Simulated time per tick")

    run = sub.add_parser("run", help="Run the tick loop for a fixed time")
    add_common(run)
    run.add_argument("--seconds", type=float, default=5.0)
    run.add_argument("--fps", type=int, help="Target FPS (default from config)")
    run.add_argument("--out", help="Save the last frame as PNG")

    sub.add_parser("list", help="List tests, patterns and parameter domains")
    return parser


# ---------------------------------------------------------------------------
# WIRING
# ---------------------------------------------------------------------------

async def create_session(args, config: ConfigManager) -> TestSession:
    app = config.app

    event_bus = EventBus()
    event_bus.add_middleware(log_middleware)

    store = ConfigStore(event_bus, config.family_snapshots())
    surface = PixelSurface(
        app.width if args.width is None else args.width,
        app.height if args.height is None else args.height,
    )
    session = TestSession(surface, store, event_bus)

    test_id = TestID(args.test)
    await session.select_test(test_id)

    overrides: Dict[str, Any] = dict(args.overrides)
    if overrides:
        await store.update(TEST_FAMILIES[test_id], **overrides)
    if args.pattern:
        await session.select_pattern(args.pattern)

    log.info(
        "Session ready",
        test=test_id.value,
        size=f"{surface.size.width}x{surface.size.height}",
        params=store.get(TEST_FAMILIES[test_id]).to_dict(),
    )
    return session


async def render_command(args, config: ConfigManager) -> int:
    session = await create_session(args, config)

    if session.is_animated:
        clock = ManualClock()
        rendered = False
        for _ in range(max(1, args.frames)):
            rendered = await session.tick(clock.advance(args.frame_ms)) or rendered
    else:
        rendered = session.draw()

    if not rendered:
        log.error("Nothing rendered: surface has no drawable area")
        return 1

    session.surface.save_png(Path(args.out))
    return 0


async def run_command(args, config: ConfigManager) -> int:
    session = await create_session(args, config)
    scheduler = FrameScheduler(session.tick, fps=args.fps or config.app.fps)

    await scheduler.start()
    try:
        await asyncio.sleep(max(0.0, args.seconds))
    finally:
        await scheduler.stop()

    metrics = scheduler.get_metrics()
    log.info(
        "Run finished",
        frames=session.ticks_rendered,
        skipped=session.ticks_skipped,
        fps=f"{metrics['fps_actual']:.1f}",
        tick_errors=metrics["tick_errors"],
    )

    if args.out:
        if not session.surface.size.is_drawable:
            log.error("No frame saved: surface has no drawable area")
            return 1
        session.surface.save_png(Path(args.out))
    return 0


def list_command() -> int:
    print("Tests:")
    for test_id in TestID:
        print(f"  {test_id.value:<14} params: {TEST_FAMILIES[test_id].value}")
    print()
    print("Burn-in patterns:")
    for pattern_id in BurnInPatternID:
        print(f"  {pattern_id.value}")
    print()
    print("Parameters:")
    for family in ParamFamily:
        print(f"  {family.value}")
        for name, domain in config_validation.describe(family).items():
            details = ", ".join(f"{k}={v}" for k, v in domain.items() if k != "label")
            print(f"    {name:<18} {details}")
    return 0


# ---------------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "list":
        return list_command()

    config = ConfigManager(args.config)
    config.load()
    configure_logger(
        LogLevel.DEBUG if args.verbose else config.app.log_level,
        use_colors=not args.no_color,
    )

    try:
        if args.command == "render":
            return asyncio.run(render_command(args, config))
        return asyncio.run(run_command(args, config))
    except ConfigurationError as e:
        log.error(f"Configuration error: {e}")
        return 2


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
        sys.exit(130)
