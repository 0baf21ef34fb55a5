import json
from typing import Callable, Dict, List

from retouch.report import ComparisonResult

OUTPUT_FORMATS = ("text", "json", "html")


def load_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        return f.read()


def render_text_report(result: ComparisonResult) -> str:
    lines: List[str] = [
        "Result",
        f"Sentences in original text: {result.total_sentences_a}",
        f"Conserved sentences: {result.conserved_sentences}",
        f"Modified or deleted sentences: {result.modified_sentences}",
        f"Retouched sentence rate: {result.sentence_retouch_percent} %",
        "",
        f"Words in original text: {result.total_words_a}",
        f"Conserved words: {result.conserved_words}",
        f"Conserved word rate: {result.word_conserved_percent} %",
    ]
    return "\n".join(lines)


def render_json_report(result: ComparisonResult) -> str:
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


def render_html_report(result: ComparisonResult) -> str:
    """
    Result block as shown under the comparison form: sentence counts, retouch
    rate in bold, then the word-level conservation.
    """
    return (
        '<div id="result">\n'
        "<strong>Result</strong><br><br>\n"
        f"Sentences in original text: {result.total_sentences_a}<br>\n"
        f"Conserved sentences: {result.conserved_sentences}<br>\n"
        f"Modified or deleted sentences: {result.modified_sentences}<br><br>\n"
        f"<strong>Retouched sentence rate: {result.sentence_retouch_percent} %</strong><br><br>\n"
        f"Words in original text: {result.total_words_a}<br>\n"
        f"Conserved words: {result.conserved_words}<br>\n"
        f"<strong>Conserved word rate: {result.word_conserved_percent} %</strong>\n"
        "</div>"
    )


_RENDERERS: Dict[str, Callable[[ComparisonResult], str]] = {
    "text": render_text_report,
    "json": render_json_report,
    "html": render_html_report,
}


def render_report(result: ComparisonResult, fmt: str = "text") -> str:
    renderer = _RENDERERS.get((fmt or "text").strip().lower())
    if renderer is None:
        raise ValueError(f"Unknown output format '{fmt}' (expected one of: {', '.join(OUTPUT_FORMATS)})")
    return renderer(result)
