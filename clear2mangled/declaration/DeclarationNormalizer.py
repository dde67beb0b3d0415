import re

# applied in this order, later rules rely on the earlier ones
ACCESS_SPECIFIERS = re.compile(r"(public|private|protected): ")
STORAGE_QUALIFIERS = re.compile(r"\b(static|virtual) ")
# removed before collapsing spaces, otherwise "__cdecl* __cdecl" leaves artifacts
CALLING_CONVENTIONS = re.compile(r"(__\w+call|__cdecl)")
SPACE_RUNS = re.compile(r" {2,}")
TAG_KEYWORDS = re.compile(r"\b(class|struct) ")
SPACE_BEFORE_PUNCTUATION = re.compile(r" ([>&*])")
# the space following "const" stays, so a trailing " __ptr64" is still removed below
TRAILING_CONST = re.compile(r"\)const")
SPECIAL_NAMES = [
    ("`vftable'", "vftable"),
    ("`vbtable'", "vbtable"),
    ("`default constructor closure'", "default_constructor_closure"),
    ("`vbase destructor'", "vbase_destructor"),
]
QUOTE_CHARS = re.compile(r"[`']")
PTR64_QUALIFIER = " __ptr64"
BRACE_SUFFIX = re.compile(r"\{.+\}")


def _normalizeOnce(text):
    text = ACCESS_SPECIFIERS.sub("", text)
    text = STORAGE_QUALIFIERS.sub("", text)
    text = CALLING_CONVENTIONS.sub("", text)
    text = SPACE_RUNS.sub(" ", text)
    text = TAG_KEYWORDS.sub("", text)
    text = SPACE_BEFORE_PUNCTUATION.sub(r"\1", text)
    text = TRAILING_CONST.sub(") const", text)
    for special_name, token in SPECIAL_NAMES:
        text = text.replace(special_name, token)
    text = QUOTE_CHARS.sub("", text)
    text = text.replace(PTR64_QUALIFIER, "")
    text = BRACE_SUFFIX.sub("", text)
    if text and text[0] == " ":
        text = text[1:]
    return text


def normalize(text):
    """
    Rewrite raw demangled text (as emitted by undname) into the canonical single-line form
    used for indexing and lookups, e.g.
        "public: static void __cdecl N::Foo(int)" -> "void N::Foo(int)"
    The rewrite pass is repeated until the text is stable, as removals in the later rules
    may expose patterns handled by earlier ones.
    """
    if not text:
        return ""
    normalized = text
    # every pass that changes the text either shrinks it or separates a ")const"
    for _ in range(2 * len(normalized) + 2):
        rewritten = _normalizeOnce(normalized)
        if rewritten == normalized:
            break
        normalized = rewritten
    return normalized
