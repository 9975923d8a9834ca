import pytest

from sitegen.models import ProjectRequirements


@pytest.fixture
def make_requirements():
    def _make(**overrides):
        fields = {"project_type": "landing", "industry": "tech"}
        fields.update(overrides)
        return ProjectRequirements(**fields)
    return _make


@pytest.fixture
def brief_md():
    return """\
# Project Brief

## Business Name
Acme Labs

## Project Type
landing

## Industry
finance

## Purpose
Generate leads and conversions

## Target Audience
Business professionals (B2B)

## Style
Bold

## Typography
technical

## Colors
- #1E40AF
- #f59e0b

## Sections
- hero
- services
- contact

## Interactive Elements
contact_form, chat_widget

## Features
- Newsletter signup
- Live chat
"""
