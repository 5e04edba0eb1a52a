import pytest

from models.interventions import (
    INTERVENTION_CATALOG,
    Intervention,
    InterventionCatalog,
    InterventionCategory,
    InterventionSpec,
)


def test_catalog_has_all_eighteen_interventions():
    assert len(INTERVENTION_CATALOG) == 18
    assert INTERVENTION_CATALOG.keys() == list(Intervention)


def test_fractions_strictly_between_zero_and_one():
    for spec in INTERVENTION_CATALOG.specs():
        assert 0.0 < spec.reduction_fraction < 1.0


def test_known_fractions():
    assert INTERVENTION_CATALOG.fraction("banOpenBurning") == 0.20
    assert INTERVENTION_CATALOG.fraction(Intervention.INDUSTRIAL_EMISSION_CONTROLS) == 0.22
    assert INTERVENTION_CATALOG.fraction("lowEmissionZone") == 0.18
    assert INTERVENTION_CATALOG.fraction("permeablePavement") == 0.04


def test_unknown_key_has_zero_fraction():
    assert INTERVENTION_CATALOG.fraction("teleportCars") == 0.0
    assert INTERVENTION_CATALOG.get("teleportCars") is None
    assert "teleportCars" not in INTERVENTION_CATALOG


def test_fractions_sum_above_one():
    total = sum(spec.reduction_fraction for spec in INTERVENTION_CATALOG.specs())
    assert total == pytest.approx(2.0)


def test_six_interventions_per_category():
    grouped = INTERVENTION_CATALOG.by_category()
    assert set(grouped) == set(InterventionCategory)
    for specs in grouped.values():
        assert len(specs) == 6


def test_display_reduction_badge_derived_from_fraction():
    # 280 * 0.12 = 33.6 -> 34
    assert INTERVENTION_CATALOG.display_reduction(280, "dedicatedBusLanes") == 34
    assert INTERVENTION_CATALOG.display_reduction(280, "banOpenBurning") == 56
    assert INTERVENTION_CATALOG.display_reduction(280, "nope") == 0


def test_describe_groups_and_badges():
    groups = INTERVENTION_CATALOG.describe(100)
    assert [g["name"] for g in groups] == [
        "Traffic & Transport",
        "Urban Design & Environment",
        "Policy & Quick Fixes",
    ]
    rows = {row["key"]: row for g in groups for row in g["interventions"]}
    assert rows["industrialEmissionControls"]["aqiReduction"] == 22
    assert rows["industrialEmissionControls"]["label"] == "Industrial Emission Controls"

    no_badges = INTERVENTION_CATALOG.describe()
    assert all("aqiReduction" not in row for g in no_badges for row in g["interventions"])


def test_malformed_catalog_rejected():
    entries = INTERVENTION_CATALOG.specs()
    with pytest.raises(ValueError):
        InterventionCatalog(entries[:-1])

    broken = [spec._replace(reduction_fraction=1.5) if i == 0 else spec for i, spec in enumerate(entries)]
    with pytest.raises(ValueError):
        InterventionCatalog(broken)


def test_catalog_spec_is_immutable():
    spec = INTERVENTION_CATALOG.get("greenWalls")
    assert isinstance(spec, InterventionSpec)
    with pytest.raises(AttributeError):
        spec.reduction_fraction = 0.9
