import pytest

from sitegen.industry_content import (
    INDUSTRY_CONTENT,
    SECTION_KEYS,
    available_industries,
    get_industry_content,
    get_industry_portfolio,
    get_industry_pricing,
    get_industry_services,
    get_industry_team,
    get_industry_testimonials,
)


def test_available_industries():
    assert available_industries() == ["tech", "finance", "healthcare", "education", "creative", "corporate"]


@pytest.mark.parametrize("industry", ["tech", "finance", "healthcare", "education", "creative", "corporate"])
def test_every_industry_has_full_copy(industry):
    content = get_industry_content(industry)
    assert set(content) == set(SECTION_KEYS)

    assert content["hero"]["title"] and content["hero"]["primary_cta"]
    assert content["about"]["feature1_title"]
    assert len(get_industry_services(industry)["services"]) == 4
    assert len(get_industry_testimonials(industry)["testimonials"]) == 3
    assert len(get_industry_team(industry)["members"]) == 3
    assert len(get_industry_portfolio(industry)["projects"]) == 3

    plans = get_industry_pricing(industry)["plans"]
    assert len(plans) == 3
    assert sum(1 for p in plans if p.get("highlighted")) == 1

    assert {"title", "description", "phone", "email", "address"} <= set(content["contact"])


def test_unknown_industry_gets_tech_copy():
    assert get_industry_content("unknown_xyz") == get_industry_content("tech")


def test_accessors_return_copies():
    services = get_industry_services("finance")
    services["services"].clear()
    services["title"] = "changed"

    fresh = get_industry_services("finance")
    assert len(fresh["services"]) == 4
    assert fresh["title"] != "changed"


def test_table_is_read_only():
    with pytest.raises(TypeError):
        INDUSTRY_CONTENT["retail"] = {}


def test_nested_copy_is_read_only():
    with pytest.raises(TypeError):
        INDUSTRY_CONTENT["tech"]["hero"]["title"] = "Changed"
    with pytest.raises(AttributeError):
        INDUSTRY_CONTENT["tech"]["services"]["services"].append({})
    assert get_industry_content("tech")["hero"]["title"] == "Innovative Technology Solutions"
