"""
Context snippets

Locates every case-insensitive occurrence of a literal term in a text and
renders each one with a bounded window of surrounding characters.
"""
import re

_LINE_BREAK = re.compile(r"\r?\n")


def _fold(text: str) -> str:
    """Lower-case text without changing its length.

    Characters whose lower-case form is longer than one character
    (e.g. "İ") are left alone so offsets in the folded string map
    one-to-one onto the original.
    """
    folded = text.lower()
    if len(folded) == len(text):
        return folded
    return "".join(c.lower() if len(c.lower()) == 1 else c for c in text)


def find_snippets(text: str, term: str, context_chars: int) -> list[str]:
    """Return one rendered snippet per occurrence of term in text.

    Overlapping occurrences are all reported: after a match at position p
    the search resumes at p + 1, so "aa" in "aaaa" matches at 0, 1 and 2.

    Example output (context_chars=5):
        "  └─ Contexto: ...total >>>Invoice<<<  #123..."
    Example output (context_chars=0):
        "  └─ Ocurrencia exacta: >>>Invoice<<<"
    """
    if not term:
        return []

    haystack = _fold(text)
    needle = _fold(term)
    length = len(term)
    snippets = []

    pos = haystack.find(needle)
    while pos != -1:
        found = text[pos:pos + length]

        if context_chars > 0:
            start = max(0, pos - context_chars)
            end = min(len(text), pos + length + context_chars)
            before = _LINE_BREAK.sub(" ", text[start:pos])
            after = _LINE_BREAK.sub(" ", text[pos + length:end])
            snippets.append(f"  └─ Contexto: ...{before} >>>{found}<<< {after}...")
        else:
            snippets.append(f"  └─ Ocurrencia exacta: >>>{found}<<<")

        pos = haystack.find(needle, pos + 1)

    return snippets
