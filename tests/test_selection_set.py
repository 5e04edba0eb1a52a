import logging

from models.interventions import Intervention, SelectionSet


def test_from_mapping_selects_truthy_known_keys():
    sel = SelectionSet.from_mapping({"banOpenBurning": True, "greenWalls": False})
    assert sel.selected == (Intervention.BAN_OPEN_BURNING,)
    assert sel.is_selected("banOpenBurning")
    assert not sel.is_selected("greenWalls")
    assert len(sel) == 1


def test_unknown_keys_are_kept_aside_and_logged(caplog):
    with caplog.at_level(logging.WARNING):
        sel = SelectionSet.from_mapping({"flyingTaxis": True, "streetTrees": True})
    assert sel.unknown_keys == ("flyingTaxis",)
    assert sel.selected == (Intervention.STREET_TREES,)
    assert "flyingTaxis" in caplog.text


def test_as_dict_echoes_all_keys_in_catalog_order():
    echo = SelectionSet.of("lowEmissionZone").as_dict()
    assert list(echo) == [key.value for key in Intervention]
    assert echo["lowEmissionZone"] is True
    assert sum(echo.values()) == 1


def test_selected_order_does_not_depend_on_input_order():
    a = SelectionSet.of("publicAwareness", "dedicatedBusLanes")
    b = SelectionSet.of("dedicatedBusLanes", "publicAwareness")
    assert a == b
    assert a.selected == b.selected == (Intervention.DEDICATED_BUS_LANES, Intervention.PUBLIC_AWARENESS)


def test_with_toggle_returns_new_selection():
    empty = SelectionSet.empty()
    on = empty.with_toggle("smartTrafficSignals")
    off = on.with_toggle("smartTrafficSignals")
    forced = on.with_toggle("smartTrafficSignals", True)

    assert len(empty) == 0
    assert on.is_selected("smartTrafficSignals")
    assert not off.is_selected("smartTrafficSignals")
    assert forced == on


def test_toggle_unknown_key_does_not_raise():
    sel = SelectionSet.empty().with_toggle("magicFilter")
    assert len(sel) == 0
    assert sel.unknown_keys == ("magicFilter",)


def test_all_selects_everything():
    assert len(SelectionSet.all()) == 18
    assert all(SelectionSet.all().as_dict().values())
