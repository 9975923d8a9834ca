import pytest

from sitegen.content_strategy import (
    CTA_OPTIONS,
    DEFAULT_PURPOSE,
    PURPOSE_STRATEGIES,
    AUDIENCE_MODIFIERS,
    generate_cta_text,
    generate_personalized_content,
    generate_value_propositions,
    get_audience_modifiers,
    get_content_strategy,
)


def test_business_name_substitution_from_camel_case_mapping():
    text = generate_personalized_content("We help our customers", {"businessName": "Acme"})
    assert text == "Acme help Acme's customers"


def test_business_name_argument_overrides_requirements(make_requirements):
    req = make_requirements(business_name="Acme")
    assert generate_personalized_content("We ship", req, business_name="Globex") == "Globex ship"


def test_entity_references_become_business_name():
    text = generate_personalized_content("Trust the company with us", {"business_name": "Acme"})
    assert text == "Trust Acme with Acme"


def test_no_business_name_leaves_pronouns(make_requirements):
    req = make_requirements(purpose="Build brand awareness", target_audience="Seniors (50+)")
    assert generate_personalized_content("We help our customers", req) == "We help our customers"


def test_consumer_audience_rewrites(make_requirements):
    req = make_requirements(business_name="Acme")
    # default audience is B2C consumers
    text = generate_personalized_content("Our solutions leverage scalable tools", req)
    assert text == "Acme's services use flexible tools"


def test_urgency_rewrites_for_fast_audience_and_high_urgency(make_requirements):
    req = make_requirements(
        purpose="Generate leads and conversions",
        target_audience="Young adults (18-30)",
    )
    text = generate_personalized_content("Contact us to learn more", req)
    assert text == "get started today to see results now"


def test_no_urgency_rewrites_for_slow_audience(make_requirements):
    req = make_requirements(
        purpose="Generate leads and conversions",
        target_audience="Enterprise decision makers",
    )
    assert generate_personalized_content("Contact us", req) == "Contact us"


@pytest.mark.parametrize("purpose,audience,primary,secondary", [
    ("Build brand awareness", "General consumers (B2C)", "Learn More", "Contact Us"),
    ("Generate leads and conversions", "Business professionals (B2B)", "Try It Free", "View Plans"),
    ("Drive event attendance", "Middle-aged professionals (30-50)", "Claim Your Spot", "Reserve Seat"),
    ("Showcase portfolio/work", "Entrepreneurs and startups", "Schedule Consultation", "Learn More"),
])
def test_cta_text(make_requirements, purpose, audience, primary, secondary):
    cta = generate_cta_text(make_requirements(purpose=purpose, target_audience=audience))
    assert (cta.primary, cta.secondary) == (primary, secondary)


def test_unknown_purpose_and_audience_fall_back():
    assert get_content_strategy("Sell ice to penguins") is PURPOSE_STRATEGIES[DEFAULT_PURPOSE]
    assert get_content_strategy(None) is PURPOSE_STRATEGIES[DEFAULT_PURPOSE]
    assert get_audience_modifiers("Martians") is AUDIENCE_MODIFIERS["General consumers (B2C)"]


def test_value_propositions(make_requirements):
    props = generate_value_propositions(make_requirements())
    assert props == [
        "thought leadership",
        "industry expertise",
        "creative approach",
        "addressing saving money",
    ]


def test_strategy_tables_are_read_only():
    strategy = get_content_strategy(DEFAULT_PURPOSE)
    with pytest.raises(AttributeError):
        strategy.messaging.secondary_values.append("free lunch")
    with pytest.raises(TypeError):
        PURPOSE_STRATEGIES["Sell ice to penguins"] = strategy
    with pytest.raises(TypeError):
        AUDIENCE_MODIFIERS["Martians"] = AUDIENCE_MODIFIERS["Seniors (50+)"]
    with pytest.raises(TypeError):
        CTA_OPTIONS["direct"]["primary"] = ("Buy",)
