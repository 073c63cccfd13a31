from ecotrip.analytics.comparison import COMPARISON_COLUMNS, compare_modes
from ecotrip.emissions.factors import EMISSION_FACTORS


def test_compare_modes_has_one_row_per_mode_sorted_by_emissions():
    frame = compare_modes(distance_km=1000, passengers=1)
    assert list(frame.columns) == COMPARISON_COLUMNS
    assert sorted(frame["mode"]) == sorted(EMISSION_FACTORS)
    assert frame["total_co2_kg"].is_monotonic_increasing
    assert frame.iloc[0]["mode"] == "bike"
    assert frame.iloc[-1]["mode"] == "planeFirst"


def test_compare_modes_classifies_each_row():
    frame = compare_modes(distance_km=1000, passengers=1).set_index("mode")
    assert frame.loc["plane", "total_co2_kg"] == 255.0
    assert frame.loc["plane", "impact_tier"] == "high"
    assert frame.loc["carGas", "impact_tier"] == "moderate"
    assert frame.loc["bike", "impact_tier"] == "low"


def test_compare_modes_with_custom_factors():
    frame = compare_modes(distance_km=10, passengers=2, factors={"a": 1.0, "b": 0.5})
    assert frame["mode"].tolist() == ["b", "a"]
    assert frame["total_co2_kg"].tolist() == [10.0, 20.0]
