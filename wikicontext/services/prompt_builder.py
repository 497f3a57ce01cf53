from typing import NamedTuple

from wikicontext.domain.context_document import ContextDocument

PROMPT_INTRO = "Based on the following corporate Wiki documentation context, please answer this question:"


class ContextSummary(NamedTuple):
    pages_processed: int
    spaces_processed: int
    size_kb: int
    filename: str


def build_prompt(question: str, document: ContextDocument) -> str:
    """Wrap `question` and the collected context into one prompt for an LLM."""
    question = (question or "").strip()
    if not question:
        raise ValueError("Please enter a question")
    return f"{PROMPT_INTRO}\n\n{question}\n\n--- WIKI CONTEXT ---\n{document.text}"


def summarize(document: ContextDocument) -> ContextSummary:
    return ContextSummary(
        pages_processed=document.pages_processed,
        spaces_processed=document.spaces_processed,
        size_kb=document.size_kb,
        filename=document.filename,
    )
