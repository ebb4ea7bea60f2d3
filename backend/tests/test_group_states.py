from app.services.state_service import group_states_by_country


def test_states_collapse_per_country():
    rows = [
        ("India", "Maharashtra", "MH"),
        ("India", "Goa", "GA"),
        ("India", "Maharashtra", "MH"),
    ]

    [india] = group_states_by_country(rows)

    assert india.country == "India"
    assert india.states == ["Maharashtra", "Goa"]
    assert india.shortnames == ["MH", "GA"]


def test_countries_keep_first_seen_order():
    rows = [
        ("Nepal", "Bagmati", "BA"),
        ("India", "Goa", "GA"),
        ("Nepal", "Gandaki", "GA"),
    ]

    groups = group_states_by_country(rows)

    assert [g.country for g in groups] == ["Nepal", "India"]
    assert groups[0].states == ["Bagmati", "Gandaki"]
    assert groups[0].shortnames == ["BA", "GA"]
    assert groups[1].shortnames == ["GA"]


def test_empty_values_are_skipped():
    [group] = group_states_by_country([("India", "Goa", ""), ("India", None, "KA")])
    assert group.states == ["Goa"]
    assert group.shortnames == ["KA"]


def test_no_rows_gives_no_groups():
    assert group_states_by_country([]) == []
