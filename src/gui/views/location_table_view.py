"""LocationTableView

QTableWidget-based rendering of the location table. Backed by
`LocationTableViewModel`, which owns ordering; the view only paints rows,
turns header clicks into `SORT_REQUESTED` events and reports the selected
row ids via `SELECTION_CHANGED`. Qt's own sorting stays disabled.
"""

from __future__ import annotations
from typing import List, Optional, Set

from PyQt6.QtCore import QItemSelectionModel, Qt
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from config import settings
from domain.models import LocationRecord, SortColumn, SortState
from gui.services.event_bus import Event, EventBus, GUIEvent, Subscription
from gui.viewmodels.location_table_viewmodel import LocationTableViewModel

__all__ = ["LocationTableView", "COLUMNS"]

# Display order of the columns; index == logical header section
COLUMNS: List[SortColumn] = [
    SortColumn.LOCATION,
    SortColumn.MONTH,
    SortColumn.YEAR,
    SortColumn.TOTAL,
]


class LocationTableView(QWidget):
    def __init__(
        self,
        viewmodel: LocationTableViewModel | None = None,
        event_bus: EventBus | None = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        if viewmodel is None:
            self.event_bus = event_bus or EventBus()
            self.viewmodel = LocationTableViewModel(event_bus=self.event_bus)
        elif viewmodel.event_bus is None:
            raise ValueError("LocationTableView needs a view model wired to an EventBus")
        else:
            self.event_bus = viewmodel.event_bus
            self.viewmodel = viewmodel
        self._selected_ids: Set[str] = set()
        self._build_ui()
        self._subscription: Subscription | None = self.event_bus.subscribe(
            GUIEvent.ROWS_RESORTED, self._on_rows_resorted
        )
        # The bus and view model may outlive this widget
        bus, sub = self.event_bus, self._subscription
        self.destroyed.connect(lambda *_: bus.unsubscribe(sub))  # type: ignore
        self._populate()

    def _build_ui(self):
        root = QVBoxLayout(self)
        self.table = QTableWidget(0, len(COLUMNS))
        self.table.setAccessibleName(settings.WINDOW_TITLE)
        self.table.setHorizontalHeaderLabels([settings.COLUMN_LABELS[c.value] for c in COLUMNS])
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.ExtendedSelection)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setAlternatingRowColors(True)
        self.table.verticalHeader().setVisible(False)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.Interactive)
        header.setStretchLastSection(True)
        header.setSortIndicatorShown(True)
        header.sectionClicked.connect(self._on_header_clicked)  # type: ignore
        self.table.itemSelectionChanged.connect(self._on_selection_changed)  # type: ignore
        root.addWidget(self.table)

    # Rendering ----------------------------------------------------------
    def _populate(self):
        rows = self.viewmodel.rows()
        self.table.blockSignals(True)
        try:
            self.table.clearSelection()
            self.table.setRowCount(len(rows))
            for r, rec in enumerate(rows):
                self._fill_row(r, rec)
                if rec.id in self._selected_ids:
                    self.table.selectionModel().select(
                        self.table.model().index(r, 0),
                        QItemSelectionModel.SelectionFlag.Select
                        | QItemSelectionModel.SelectionFlag.Rows,
                    )
        finally:
            self.table.blockSignals(False)
        self._update_sort_indicator(self.viewmodel.sort_state)

    def _fill_row(self, r: int, rec: LocationRecord):
        values = [rec.location, str(rec.month), str(rec.year), str(rec.total)]
        for c, text in enumerate(values):
            item = QTableWidgetItem(text)
            item.setData(Qt.ItemDataRole.UserRole, rec.id)
            self.table.setItem(r, c, item)

    def _update_sort_indicator(self, state: SortState):
        order = (
            Qt.SortOrder.AscendingOrder
            if state.direction.is_ascending
            else Qt.SortOrder.DescendingOrder
        )
        self.table.horizontalHeader().setSortIndicator(COLUMNS.index(state.column), order)

    # Event wiring -------------------------------------------------------
    def _on_rows_resorted(self, _event: Event):
        self._populate()

    def _on_header_clicked(self, logical_index: int):
        if 0 <= logical_index < len(COLUMNS):
            self.event_bus.publish(GUIEvent.SORT_REQUESTED, COLUMNS[logical_index].value)

    def _on_selection_changed(self):
        ids: List[str] = []
        for index in self.table.selectionModel().selectedRows():
            item = self.table.item(index.row(), 0)
            if item is not None:
                ids.append(item.data(Qt.ItemDataRole.UserRole))
        self._selected_ids = set(ids)
        self.event_bus.publish(GUIEvent.SELECTION_CHANGED, ids)

    def dispose(self):
        if self._subscription is not None:
            self.event_bus.unsubscribe(self._subscription)
            self._subscription = None

    # Testing helpers ----------------------------------------------------
    def column_texts(self, column: int) -> List[str]:
        out: List[str] = []
        for r in range(self.table.rowCount()):
            item = self.table.item(r, column)
            out.append(item.text() if item else "")
        return out

    def selected_ids(self) -> List[str]:  # pragma: no cover - trivial accessor
        return sorted(self._selected_ids)
