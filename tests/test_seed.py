"""
Seed catalog tests.
"""

import math

from costing.seed import belly_item, chennai_pot, default_app_settings, item_11, plain_item, seed_items


def test_seed_catalog_has_all_lines():
    items = seed_items()
    assert len(items) == 21
    names = [i.name for i in items]
    assert names[0] == 'Belly 7" (heavy)'
    assert names[4] == 'Belly 7" (light)'
    assert names[8] == 'Plain 7" (heavy)'
    assert '11" Items (0.26, light bag, kunda 5g)' in names
    assert sum(1 for n in names if n.startswith("Chennai Pot")) == 4


def test_seed_ids_are_fresh_and_unique():
    first = [i.id for i in seed_items()]
    second = [i.id for i in seed_items()]
    assert len(set(first)) == len(first)
    assert not set(first) & set(second)


def test_seed_items_have_no_explicit_circle_rate():
    """Seeded items price from the org-wide fallback."""
    for item in seed_items():
        assert item.box.circle_rate_per_kg is None
        assert item.cover.circle_rate_per_kg is None
        assert item.box.induction is not None and not item.box.induction.enabled


def test_belly_and_plain_mappings():
    belly = belly_item(9, "light")
    assert belly.box.circle_size_in == 8.5
    assert belly.cover.circle_size_in == 6.5
    assert belly.box.press.rate_per_kg == 20
    assert belly.bag_profile.name == "light"
    assert belly.bag_profile.polybag.gauge == 100

    plain = plain_item(10, "heavy")
    assert plain.box.circle_size_in == 9.0
    assert plain.box.press.rate_per_kg == 16
    assert plain.bag_profile.pipe.gauge == 225
    assert plain.bag_profile.pipe.width_in == 10


def test_special_items():
    eleven = item_11()
    assert eleven.kunda.enabled and eleven.kunda.weight_g == 5
    assert eleven.bag_profile.pipe.pcs_per_pipe == 6
    assert eleven.packing.packing_rate_per_kg == 15

    pot = chennai_pot("Pot", 8.25, 5.75, 0.33, 0.26, 5, 205, "light", 9, 8)
    assert pot.box.thickness_mm == 0.33
    assert pot.cover.thickness_mm == 0.26
    assert pot.cover.press.job_wastage_pct == 0


def test_default_settings():
    s = default_app_settings()
    assert s.circle_base_rate == 170
    assert s.circle_add_per_kg == 5
    assert s.circle_extra_add_per_kg == 0
    assert s.bag_standard_kg == 80


def test_every_seed_item_prices(settings, calculator):
    for item in seed_items():
        result = calculator.calculate(item, settings)
        assert result.per_kg_rate > 0, item.name
        assert math.isfinite(result.per_pc_rate)
        assert result.pcs_per_bag > 0
        assert result.debug.scrap_credit > 0
