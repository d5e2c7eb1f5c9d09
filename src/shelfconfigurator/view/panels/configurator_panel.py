"""
Configurator Control Panel
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QColor, QPixmap, QIcon
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QFormLayout, QComboBox, QListWidget,
    QListWidgetItem, QPushButton, QSpinBox, QLabel, QLineEdit
)

from shelfconfigurator.config import GRID_EDIT_LIMIT
from shelfconfigurator.controller.session import ConfiguratorSession
from shelfconfigurator.model.catalog import (
    BASE_TYPE_LABELS, DEPTH_UNITS, FRONT_TYPE_LABELS, HEIGHT_UNITS, PALETTE, PRESETS, WIDTH_UNITS,
    BaseType, FrontType, units_to_mm
)
from shelfconfigurator.model.errors import ConfiguratorError, ModuleNotFoundInConfiguration
from shelfconfigurator.model.module import Module
from shelfconfigurator.model.state import Configuration


def _color_icon(hex_color: str) -> QIcon:
    pixmap = QPixmap(14, 14)
    pixmap.fill(QColor(hex_color))
    return QIcon(pixmap)


def size_label(units: float) -> str:
    return f"{units:g} u ({units_to_mm(units)} mm)"


def is_editable_position(module: Module, limit: int = GRID_EDIT_LIMIT) -> bool:
    """Whether the position spin boxes can show the module's cell without clipping it."""
    return (
        abs(module.grid_x) <= limit
        and 0 <= module.grid_y <= limit
        and abs(module.grid_z) <= limit
    )


class ConfiguratorPanel(QWidget):
    """
    Left-hand editor.

    Top: configuration name, preset and base selection.
    Middle: module list with add/delete.
    Bottom: editor for the selected module and the overall summary.
    """
    def __init__(self, session: ConfiguratorSession, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.session = session
        self._updating = False

        layout = QVBoxLayout(self)

        # --- Configuration Group ---
        grp_config = QGroupBox("Configuration")
        form_config = QFormLayout(grp_config)

        self.edit_name = QLineEdit()
        self.edit_name.editingFinished.connect(self._on_name_edited)
        form_config.addRow("Name:", self.edit_name)

        self.combo_preset = QComboBox()
        self.combo_preset.addItem("Choose preset...", userData=None)
        for key, preset in PRESETS.items():
            self.combo_preset.addItem(preset.name, userData=key)
        self.combo_preset.activated.connect(self._on_preset_chosen)
        form_config.addRow("Preset:", self.combo_preset)

        self.combo_base = QComboBox()
        for base_type in BaseType:
            self.combo_base.addItem(BASE_TYPE_LABELS[base_type], userData=str(base_type))
        self.combo_base.activated.connect(self._on_base_chosen)
        form_config.addRow("Base:", self.combo_base)

        layout.addWidget(grp_config)

        # --- Modules Group ---
        grp_modules = QGroupBox("Modules")
        modules_layout = QVBoxLayout(grp_modules)
        self.list_modules = QListWidget()
        self.list_modules.currentItemChanged.connect(self._on_list_selection)
        modules_layout.addWidget(self.list_modules)

        buttons = QHBoxLayout()
        self.btn_add = QPushButton("Add Module")
        self.btn_add.clicked.connect(self.session.add_module)
        self.btn_delete = QPushButton("Delete")
        self.btn_delete.clicked.connect(self._on_delete_clicked)
        buttons.addWidget(self.btn_add)
        buttons.addWidget(self.btn_delete)
        modules_layout.addLayout(buttons)
        layout.addWidget(grp_modules)

        # --- Selected Module Group ---
        self.grp_module = QGroupBox("Selected Module")
        form_module = QFormLayout(self.grp_module)

        self.combo_width = self._make_size_combo(WIDTH_UNITS)
        self.combo_height = self._make_size_combo(HEIGHT_UNITS)
        self.combo_depth = self._make_size_combo(DEPTH_UNITS)
        form_module.addRow("Width:", self.combo_width)
        form_module.addRow("Height:", self.combo_height)
        form_module.addRow("Depth:", self.combo_depth)
        for combo in (self.combo_width, self.combo_height, self.combo_depth):
            combo.activated.connect(self._on_size_or_style_edited)

        self.combo_color = QComboBox()
        for color in PALETTE:
            self.combo_color.addItem(_color_icon(color.hex), color.label, userData=color.hex)
        self.combo_color.activated.connect(self._on_size_or_style_edited)
        form_module.addRow("Color:", self.combo_color)

        self.combo_front = QComboBox()
        for front_type in FrontType:
            self.combo_front.addItem(FRONT_TYPE_LABELS[front_type], userData=str(front_type))
        self.combo_front.activated.connect(self._on_size_or_style_edited)
        form_module.addRow("Front:", self.combo_front)

        self.spin_x = self._make_grid_spin()
        self.spin_y = self._make_grid_spin(minimum=0)
        self.spin_z = self._make_grid_spin()
        form_module.addRow("Grid X:", self.spin_x)
        form_module.addRow("Grid Y (level):", self.spin_y)
        form_module.addRow("Grid Z:", self.spin_z)

        self.btn_move = QPushButton("Apply Position")
        self.btn_move.clicked.connect(self._on_move_clicked)
        form_module.addRow(self.btn_move)

        layout.addWidget(self.grp_module)

        # --- Summary ---
        self.lbl_summary = QLabel("")
        self.lbl_summary.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.lbl_summary)

        self.lbl_status = QLabel("")
        self.lbl_status.setWordWrap(True)
        self.lbl_status.setStyleSheet("color: red;")
        layout.addWidget(self.lbl_status)

        layout.addStretch()

        # --- SIGNAL CONNECTIONS ---
        self.session.configuration_changed.connect(self.refresh)
        self.session.selection_changed.connect(self._on_session_selection)
        self.session.error_occurred.connect(self.lbl_status.setText)

        self.refresh(self.session.configuration)

    @staticmethod
    def _make_size_combo(choices: list[float]) -> QComboBox:
        combo = QComboBox()
        for units in choices:
            combo.addItem(size_label(units), userData=float(units))
        return combo

    @staticmethod
    def _select_size(combo: QComboBox, units: float) -> None:
        index = combo.findData(float(units))
        if index < 0:
            # Imported sizes outside the catalog are shown as an extra entry
            combo.addItem(size_label(units), userData=float(units))
            index = combo.count() - 1
        combo.setCurrentIndex(index)

    def _make_grid_spin(self, minimum: int = -GRID_EDIT_LIMIT) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(minimum, GRID_EDIT_LIMIT)
        return spin

    # ------------------------------------------------------------------------------
    # Refresh from session
    # ------------------------------------------------------------------------------

    @Slot(object)
    def refresh(self, configuration: Configuration) -> None:
        self._updating = True
        try:
            self.edit_name.setText(configuration.name)
            self.combo_base.setCurrentIndex(self.combo_base.findData(str(configuration.base_type)))

            self.list_modules.clear()
            for index, module in enumerate(configuration.modules, start=1):
                text = (f"#{index}  {module.width:g}×{module.height:g}×{module.depth:g}  "
                        f"({module.grid_x}, {module.grid_y}, {module.grid_z})  {module.front_type}")
                item = QListWidgetItem(_color_icon(module.color), text)
                item.setData(Qt.UserRole, module.id)
                self.list_modules.addItem(item)
                if module.id == self.session.selected_module_id:
                    self.list_modules.setCurrentItem(item)
        finally:
            self._updating = False

        self._load_selected_module()

        bounds = self.session.bounds()
        self.lbl_summary.setText(
            f"{bounds.label()}\n"
            f"Reference price: {self.session.reference_price():,} KRW"
        )
        self.btn_delete.setEnabled(bool(configuration.modules))

    def _load_selected_module(self) -> None:
        module = self.session.selected_module
        self.grp_module.setEnabled(module is not None)
        if module is None:
            return

        self._updating = True
        try:
            self._select_size(self.combo_width, module.width)
            self._select_size(self.combo_height, module.height)
            self._select_size(self.combo_depth, module.depth)
            color_index = self.combo_color.findData(module.color)
            if color_index < 0:
                # Imported colors outside the palette are shown as an extra entry
                self.combo_color.addItem(_color_icon(module.color), module.color, userData=module.color)
                color_index = self.combo_color.count() - 1
            self.combo_color.setCurrentIndex(color_index)
            self.combo_front.setCurrentIndex(self.combo_front.findData(str(module.front_type)))
            editable = is_editable_position(module)
            if editable:
                self.spin_x.setValue(module.grid_x)
                self.spin_y.setValue(module.grid_y)
                self.spin_z.setValue(module.grid_z)
        finally:
            self._updating = False

        # Clipped spin box values must never be applied as a move
        self.btn_move.setEnabled(editable)
        if not editable:
            self.lbl_status.setText(
                f"Position {module.cell} is outside the editable range (±{GRID_EDIT_LIMIT})."
            )

    # ------------------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------------------

    @Slot(str)
    def _on_session_selection(self, module_id: str) -> None:
        self.lbl_status.clear()
        self.refresh(self.session.configuration)

    def _on_list_selection(self, current: Optional[QListWidgetItem], _previous) -> None:
        if self._updating or current is None:
            return
        self.session.select_module(current.data(Qt.UserRole))

    def _on_name_edited(self) -> None:
        name = self.edit_name.text().strip()
        if name and name != self.session.configuration.name:
            self.session.rename(name)

    def _on_preset_chosen(self, index: int) -> None:
        key = self.combo_preset.itemData(index)
        if key:
            self.session.load_preset(key)
        self.combo_preset.setCurrentIndex(0)

    def _on_base_chosen(self, index: int) -> None:
        self.session.set_base_type(self.combo_base.itemData(index))

    def _on_delete_clicked(self) -> None:
        module_id = self.session.selected_module_id
        if module_id is None:
            return
        try:
            self.session.remove_module(module_id)
        except (ConfiguratorError, ModuleNotFoundInConfiguration):
            # Already reported through error_occurred
            return
        self.lbl_status.clear()

    def _on_size_or_style_edited(self, *_) -> None:
        if self._updating or self.session.selected_module_id is None:
            return
        self.session.update_module(
            self.session.selected_module_id,
            width=self.combo_width.currentData(),
            height=self.combo_height.currentData(),
            depth=self.combo_depth.currentData(),
            color=self.combo_color.currentData(),
            front_type=self.combo_front.currentData(),
        )

    def _on_move_clicked(self) -> None:
        module_id = self.session.selected_module_id
        if module_id is None:
            return
        try:
            self.session.move_module(module_id, self.spin_x.value(), self.spin_y.value(), self.spin_z.value())
        except (ConfiguratorError, ModuleNotFoundInConfiguration):
            # Restore the spin boxes to the committed position
            self._load_selected_module()
            return
        self.lbl_status.clear()
