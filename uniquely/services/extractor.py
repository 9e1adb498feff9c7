from typing import List

from bs4 import BeautifulSoup

from uniquely.models.content import ContentFields, ContentRecord

# Subtrees that never hold visible copy in a rendered page body
_INVISIBLE_TAGS = {"script", "style", "noscript", "template"}


def _collect(parts: List[str], *values) -> None:
    for value in values:
        if value:
            parts.append(value)


def extract_text(fields: ContentFields) -> str:
    """Flatten every human-readable frontmatter field into one string.

    Order: description, hero, about, FAQs, specialists.  Missing sections
    contribute nothing.
    """
    parts: List[str] = []
    _collect(parts, fields.description)

    hero = fields.hero
    if hero:
        _collect(parts, hero.heading, hero.subheading, hero.description, hero.title)

    about = fields.about
    if about:
        _collect(parts, about.what_is, *about.when_needed, *about.what_achieve, *about.key_points)

    for faq in fields.faqs:
        _collect(parts, faq.question, faq.answer)

    specialists = fields.specialists
    if specialists:
        _collect(parts, specialists.title, specialists.description)
        for card in specialists.cards:
            _collect(parts, card.title, card.description)

    return " ".join(parts)


def body_text(record: ContentRecord) -> str:
    """Return the analysable text of the record body."""
    if record.body_format != "html":
        return record.body

    soup = BeautifulSoup(record.body, "lxml")
    for tag in soup.find_all(_INVISIBLE_TAGS):
        tag.decompose()
    return soup.get_text(" ", strip=True)


def document_text(record: ContentRecord) -> str:
    """Frontmatter text and body combined, as used for fingerprinting."""
    return extract_text(record.frontmatter) + " " + body_text(record)
