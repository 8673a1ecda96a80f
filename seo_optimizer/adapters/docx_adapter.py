from __future__ import annotations
from pathlib import Path
import logging

from docx import Document

from seo_optimizer.blog import DraftPost, iter_markdown_blocks

logger = logging.getLogger(__name__)

_HEADING_LEVELS = {"h2": 2, "h3": 3}

def emit_draft_docx(draft: DraftPost, out_docx: str) -> str:
    doc = Document()
    doc.add_heading(draft.title, level=0)
    for kind, text in iter_markdown_blocks(draft.content):
        if kind in _HEADING_LEVELS:
            doc.add_heading(text, level=_HEADING_LEVELS[kind])
        else:
            # Run.text turns "\n" into line breaks
            doc.add_paragraph(text)

    props = doc.core_properties
    props.title = draft.title
    props.keywords = ", ".join(draft.tags)
    props.language = draft.language
    props.category = draft.status

    Path(out_docx).parent.mkdir(parents=True, exist_ok=True)
    doc.save(out_docx)
    logger.info(f"Saved {draft.status} '{draft.title}' to {out_docx}")
    return out_docx
