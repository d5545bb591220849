"""Launcher for `python -m gui` or the `location-table` console script.

    location-table data.json --log-level DEBUG --trace-events

Loads the dataset through the bootstrap, then shows a window hosting the
`LocationTableView`. Exit code 1 when the dataset cannot be loaded.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from config import settings
from domain.models import LocationTableError
from gui.app.bootstrap import create_app
from gui.services.event_bus import Event, GUIEvent

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="location-table", description="Show a sortable table of location totals."
    )
    ap.add_argument(
        "data_file",
        nargs="?",
        default=settings.DATA_FILE,
        help='JSON dataset shaped like {"values": [...]} (default: %(default)s)',
    )
    ap.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    ap.add_argument(
        "--strict-ids",
        action="store_true",
        default=settings.STRICT_RECORD_IDS,
        help="refuse datasets whose rows derive the same id",
    )
    ap.add_argument(
        "--trace-events",
        action="store_true",
        help="keep recent bus events and log them on exit",
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:  # pragma: no cover - GUI runtime
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        ctx = create_app(
            headless=False,
            data_file=args.data_file,
            strict_ids=args.strict_ids,
            trace_events=args.trace_events,
        )
    except LocationTableError as e:
        log.error("%s", e)
        return 1

    from PyQt6.QtWidgets import QMainWindow

    from gui.views.location_table_view import LocationTableView

    win = QMainWindow()
    win.setWindowTitle(f"{settings.WINDOW_TITLE} ({ctx.metadata['record_count']} rows)")
    view = LocationTableView(ctx.viewmodel)
    win.setCentralWidget(view)

    def _show_selection(evt: Event) -> None:
        win.statusBar().showMessage(f"{len(evt.payload)} selected")

    ctx.event_bus.subscribe(GUIEvent.SELECTION_CHANGED, _show_selection)
    win.resize(640, 600)
    win.show()
    code = ctx.qt_app.exec()
    for name, ts, summary in ctx.event_bus.recent_traces():
        log.info("event %s at %.3f: %s", name, ts, summary)
    return code


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
