"""Tests for uniquely.services.extractor and the content record schema."""

import pytest
from pydantic import ValidationError

from uniquely.models.content import ContentFields, ContentRecord
from uniquely.services.extractor import body_text, document_text, extract_text


_FULL_FRONTMATTER = {
    "title": "Ignored title",
    "description": "Desc",
    "hero": {"heading": "Heading", "subheading": "Sub", "description": "HeroDesc", "title": "HeroTitle"},
    "about": {
        "whatIs": "WhatIs",
        "whenNeeded": ["When1", "When2"],
        "whatAchieve": ["Achieve"],
        "keyPoints": ["Key"],
    },
    "faqs": [{"question": "Q1", "answer": "A1"}, {"question": "Q2", "answer": "A2"}],
    "specialists": {
        "title": "SpecTitle",
        "description": "SpecDesc",
        "cards": [{"title": "CardTitle", "description": "CardDesc"}],
    },
}


class TestExtractText:
    def test_collects_fields_in_order(self):
        fields = ContentFields.model_validate(_FULL_FRONTMATTER)
        assert extract_text(fields) == (
            "Desc Heading Sub HeroDesc HeroTitle WhatIs When1 When2 Achieve Key "
            "Q1 A1 Q2 A2 SpecTitle SpecDesc CardTitle CardDesc"
        )

    def test_empty_frontmatter(self):
        assert extract_text(ContentFields()) == ""

    def test_unknown_fields_ignored(self):
        fields = ContentFields.model_validate({"slug": "kent", "keywords": ["a", "b"]})
        assert extract_text(fields) == ""

    def test_wrong_shapes_are_skipped(self):
        fields = ContentFields.model_validate(
            {
                "description": 42,
                "hero": "not a mapping",
                "about": {"whatIs": ["list"], "whenNeeded": "scalar", "keyPoints": ["ok", 3]},
                "faqs": [{"question": "Q?", "answer": None}, "junk"],
                "specialists": {"cards": "none"},
            }
        )
        assert extract_text(fields) == "ok Q?"

    def test_faqs_not_a_list(self):
        fields = ContentFields.model_validate({"faqs": {"question": "Q"}})
        assert fields.faqs == []


class TestBodyText:
    def test_text_body_used_verbatim(self):
        record = ContentRecord(identifier="a", category="service", body="# Heading\n\nBody")
        assert body_text(record) == "# Heading\n\nBody"

    def test_html_body_reduced_to_visible_text(self):
        record = ContentRecord(
            identifier="a",
            category="service",
            body="<p>Hello <b>world</b></p><script>var tracking = 1;</script><style>p{}</style>",
            body_format="html",
        )
        assert body_text(record) == "Hello world"


class TestDocumentText:
    def test_frontmatter_then_body(self):
        record = ContentRecord(
            identifier="a",
            category="service",
            frontmatter={"description": "Front text"},
            body="Body text",
        )
        assert document_text(record) == "Front text Body text"

    def test_empty_record(self):
        record = ContentRecord(identifier="a", category="location")
        assert document_text(record).strip() == ""


class TestContentRecord:
    def test_service_category_from_path(self):
        record = ContentRecord.from_frontmatter("content/services/plumbing.mdx", {}, "body")
        assert record.category == "service"
        assert record.identifier == "content/services/plumbing.mdx"

    def test_location_category_from_path(self):
        record = ContentRecord.from_frontmatter("content/locations/kent.mdx", {"description": "Kent"})
        assert record.category == "location"
        assert record.frontmatter.description == "Kent"

    def test_record_is_immutable(self):
        record = ContentRecord(identifier="a", category="service", body="x")
        with pytest.raises(ValidationError):
            record.body = "changed"

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            ContentRecord(identifier="a", category="blog")
