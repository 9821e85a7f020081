from dataclasses import replace

from dockable.translations import (
    LeafTranslations,
    TabContextMenuTranslations,
    Translations,
)


def test_tab_context_menu_english():
    t = TabContextMenuTranslations.english()
    assert t.close_button == "Close"
    assert t.eject_button == "Eject"


def test_leaf_english_values():
    leaf = LeafTranslations.english()
    assert leaf.close_button_disabled_tooltip == "This leaf contains non-closable tabs."
    assert leaf.close_all_button == "Close window"
    assert leaf.minimize_button == "Minimize window"
    assert leaf.close_all_button_menu_hint == "Right click to close this window."
    assert leaf.minimize_button_menu_hint == "Right click to minimize this window."


def test_translations_english_composes_parts():
    t = Translations.english()
    assert t.tab_context_menu == TabContextMenuTranslations.english()
    assert t.leaf == LeafTranslations.english()


def test_english_instances_are_independent():
    a = Translations.english()
    b = Translations.english()
    a.tab_context_menu.eject_button = "Undock"
    assert b.tab_context_menu.eject_button == "Eject"
    assert a != b


def test_custom_translations():
    menu = TabContextMenuTranslations(close_button="Zamknij", eject_button="Przenieś")
    t = Translations(tab_context_menu=menu, leaf=LeafTranslations.english())
    assert t.tab_context_menu.close_button == "Zamknij"
    assert t.tab_context_menu.eject_button == "Przenieś"


def test_replace_keeps_other_fields():
    leaf = LeafTranslations.english()
    changed = replace(leaf, close_all_button="Fermer")
    assert changed.close_all_button == "Fermer"
    assert changed.minimize_button == leaf.minimize_button