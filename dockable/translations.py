"""Text shown by the dock area's buttons, tooltips and context menus."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TabContextMenuTranslations:
    """Labels of the buttons in a tab's right-click context menu."""

    close_button: str
    eject_button: str

    @classmethod
    def english(cls) -> TabContextMenuTranslations:
        """Default English labels."""
        return cls(close_button="Close", eject_button="Eject")


@dataclass
class LeafTranslations:
    """Labels and tooltips of the primary buttons on a tab bar."""

    close_button_disabled_tooltip: str
    close_all_button: str
    close_all_button_menu_hint: str
    close_all_button_modifier_hint: str
    close_all_button_modifier_menu_hint: str
    close_all_button_disabled_tooltip: str
    minimize_button: str
    minimize_button_menu_hint: str
    minimize_button_modifier_hint: str
    minimize_button_modifier_menu_hint: str

    @classmethod
    def english(cls) -> LeafTranslations:
        """Default English labels."""
        return cls(
            close_button_disabled_tooltip="This leaf contains non-closable tabs.",
            close_all_button="Close window",
            close_all_button_menu_hint="Right click to close this window.",
            close_all_button_modifier_hint=(
                "Press modifier keys (Shift by default) to close this window."
            ),
            close_all_button_modifier_menu_hint=(
                "Press modifier keys (Shift by default) or right click to close this window."
            ),
            close_all_button_disabled_tooltip="This window contains non-closable tabs.",
            minimize_button="Minimize window",
            minimize_button_menu_hint="Right click to minimize this window.",
            minimize_button_modifier_hint=(
                "Press modifier keys (Shift by default) to minimize this window."
            ),
            minimize_button_modifier_menu_hint=(
                "Press modifier keys (Shift by default) or right click to minimize this window."
            ),
        )


@dataclass
class Translations:
    """All text overrides used by the dock area."""

    tab_context_menu: TabContextMenuTranslations
    leaf: LeafTranslations

    @classmethod
    def english(cls) -> Translations:
        """Default English text for every element."""
        return cls(
            tab_context_menu=TabContextMenuTranslations.english(),
            leaf=LeafTranslations.english(),
        )