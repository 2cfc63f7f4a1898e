#!/usr/bin/env python3
"""Input form for a single block definition.

The widget owns every input field and nothing else: it never builds scripts
itself. :meth:`BlockFormWidget.collect` snapshots the fields into a
:class:`~models.block_spec.FormState`, which is what the *Generate* button
emits.
"""

from __future__ import annotations

from PyQt5.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QFormLayout,
    QGroupBox,
    QLineEdit,
    QComboBox,
    QCheckBox,
    QPushButton,
)
from PyQt5.QtCore import pyqtSignal, Qt

from config_manager import ConfigManager
from models.block_spec import FormState, MATERIALS

__all__ = ["BlockFormWidget"]


class BlockFormWidget(QWidget):
    """Block ID, material, hardness and advanced property fields + Generate button."""

    generate_requested = pyqtSignal(object)  # FormState

    def __init__(self, config_manager: ConfigManager, parent: QWidget | None = None):
        super().__init__(parent)
        self.config = config_manager

        root_layout = QVBoxLayout(self)

        # ------------------------------------------------------------------
        # Basic properties
        # ------------------------------------------------------------------
        basic_box = QGroupBox("Basic")
        basic_form = QFormLayout(basic_box)

        self.block_id_edit = QLineEdit()
        self.block_id_edit.setPlaceholderText("e.g. test_block (letters, digits, _)")

        self.material_combobox = QComboBox()
        self.material_combobox.addItems(MATERIALS)
        index = self.material_combobox.findText(self.config.get("ui_settings.default_material", "wood"))
        if index != -1:
            self.material_combobox.setCurrentIndex(index)

        self.unbreakable_checkbox = QCheckBox("Unbreakable")
        self.use_strength_checkbox = QCheckBox("Use strength (hardness + resistance)")

        basic_form.addRow("Block ID:", self.block_id_edit)
        basic_form.addRow("Material:", self.material_combobox)
        basic_form.addRow(self.unbreakable_checkbox)
        basic_form.addRow(self.use_strength_checkbox)
        root_layout.addWidget(basic_box)

        # ------------------------------------------------------------------
        # Hardness: two mutually exclusive groups
        # ------------------------------------------------------------------
        self.hardness_only_group = QGroupBox("Hardness")
        hardness_form = QFormLayout(self.hardness_only_group)
        self.hardness_only_edit = QLineEdit()
        self.hardness_only_edit.setPlaceholderText("e.g. 2.5")
        hardness_form.addRow("Hardness:", self.hardness_only_edit)

        self.strength_group = QGroupBox("Strength")
        strength_form = QFormLayout(self.strength_group)
        self.strength_hardness_edit = QLineEdit()
        self.strength_hardness_edit.setPlaceholderText("e.g. 3")
        self.resistance_edit = QLineEdit()
        self.resistance_edit.setPlaceholderText("e.g. 15")
        strength_form.addRow("Hardness:", self.strength_hardness_edit)
        strength_form.addRow("Blast resistance:", self.resistance_edit)

        root_layout.addWidget(self.hardness_only_group)
        root_layout.addWidget(self.strength_group)

        # ------------------------------------------------------------------
        # Advanced properties (pre-filled with their defaults)
        # ------------------------------------------------------------------
        advanced_box = QGroupBox("Advanced")
        advanced_form = QFormLayout(advanced_box)
        self.harvest_level_edit = QLineEdit("0")
        self.light_level_edit = QLineEdit("0")
        self.light_opacity_edit = QLineEdit("0")
        self.slipperiness_edit = QLineEdit("0.6")
        advanced_form.addRow("Harvest level:", self.harvest_level_edit)
        advanced_form.addRow("Light level (0-15):", self.light_level_edit)
        advanced_form.addRow("Light opacity (0-255):", self.light_opacity_edit)
        advanced_form.addRow("Slipperiness (0-1):", self.slipperiness_edit)
        root_layout.addWidget(advanced_box)

        self.generate_button = QPushButton("Generate Script")
        root_layout.addWidget(self.generate_button)
        root_layout.addStretch(1)

        # ------------------------------------------------------------------
        # Signal wiring
        # ------------------------------------------------------------------
        self.use_strength_checkbox.stateChanged.connect(
            lambda state: self.set_strength_mode(state == Qt.Checked)
        )
        self.generate_button.clicked.connect(lambda: self.generate_requested.emit(self.collect()))

        self.set_strength_mode(self.use_strength_checkbox.isChecked())

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_strength_mode(self, enabled: bool) -> None:  # noqa: D401
        """Show the strength inputs and hide plain hardness, or the reverse."""
        self.strength_group.setVisible(enabled)
        self.hardness_only_group.setVisible(not enabled)

    def collect(self) -> FormState:
        """Snapshot the current field values."""
        return FormState(
            block_id=self.block_id_edit.text(),
            material=self.material_combobox.currentText(),
            unbreakable=self.unbreakable_checkbox.isChecked(),
            use_strength=self.use_strength_checkbox.isChecked(),
            hardness_only=self.hardness_only_edit.text(),
            strength_hardness=self.strength_hardness_edit.text(),
            resistance=self.resistance_edit.text(),
            harvest_level=self.harvest_level_edit.text(),
            light_level=self.light_level_edit.text(),
            light_opacity=self.light_opacity_edit.text(),
            slipperiness=self.slipperiness_edit.text(),
        )
