from .constants import PROPERTY_RE

__all__ = ['tokenize', 'tokenize_lines']


def tokenize(raw: str):
    # lines that don't look like KEY:VALUE are silently skipped,
    # folded (continuation) lines are not joined back.
    for m in PROPERTY_RE.finditer(raw):
        yield (m.group(1), m.group(2))


def tokenize_lines(lines):
    return tokenize('\n'.join(lines))
