"""
Markdown note template and renderer
"""

import re
from datetime import date
from typing import Tuple

from .models import PaperRecord

NOTE_TEMPLATE = """---
paper id: {{ paper_id }}
title: {{ title }}
authors: {{ authors }}
publication year: {{ year }}
publication date: {{ date }}
abstract: {{ abstract }}
comments: {{ comments }}
pdf: {{ pdf_link }}
url: https://arxiv.org/abs/{{ paper_id }}
tags: []
---
"""

DATE_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')


def _placeholder(name: str) -> re.Pattern:
    return re.compile(r'{{\s*' + name + r'\s*}}', re.IGNORECASE)


def derive_date_fields(raw_date: str) -> Tuple[str, str]:
    """
    Derive the year and date fields from a free-form date

    The date field is "<month>.<weekday>" with a zero-based month and a
    Sunday=0 weekday. Dates without a YYYY-MM-DD part (or with an
    impossible one) are used verbatim for both fields.

    Args:
        raw_date: Date string from the paper metadata

    Returns:
        Tuple of (year, date_field)
    """
    match = DATE_PATTERN.search(raw_date)
    if match is None:
        return raw_date, raw_date

    try:
        parsed = date.fromisoformat(match.group(0))
    except ValueError:
        return raw_date, raw_date

    weekday = parsed.isoweekday() % 7
    return str(parsed.year), f"{parsed.month - 1}.{weekday}"


def format_authors(authors) -> str:
    """Render authors as a YAML list block under its key"""
    return '\n' + '\n'.join(f"- {author}" for author in authors)


def render_note(
    paper: PaperRecord,
    pdf_path: str,
    template: str = NOTE_TEMPLATE,
) -> str:
    """
    Fill the note template with paper metadata

    Every occurrence of each placeholder is replaced. Placeholder names
    are matched ignoring case and the whitespace inside the braces.

    Args:
        paper: Paper metadata
        pdf_path: Vault path of the stored PDF, used as the link target
        template: Template text

    Returns:
        Rendered note content
    """
    year, date_field = derive_date_fields(paper.date)

    values = {
        'paper_id': paper.paper_id,
        'title': f'"{paper.title}"',
        'authors': format_authors(paper.authors),
        'year': year,
        'date': date_field,
        'abstract': f'"{paper.abstract}"',
        'comments': f'"{paper.comments}"',
        'pdf_link': f'"[[{pdf_path}]]"',
    }

    content = template
    for name, value in values.items():
        # Callable replacement keeps backslashes in the value literal
        content = _placeholder(name).sub(lambda _m, v=value: v, content)

    return content
