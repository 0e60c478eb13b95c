"""Lexical heuristics over raw source text.

None of these build a syntax tree. Each one is a standalone predicate or
extractor so a real parser can replace any of them without touching the
callers in ``classifier`` and ``graph``.
"""

import re
from pathlib import PurePosixPath
from typing import Iterable

_DECL_KIND = r"(?:async\s+)?(?:function\*?|class|const|let|var)"

_IMPORT_RE = re.compile(
    r"import\s+(?:type\s+)?"
    r"(?:\{[^}]*\}"  # import { a, b } from
    r"|\*\s+as\s+[\w$]+"  # import * as ns from
    r"|[\w$]+(?:\s*,\s*(?:\{[^}]*\}|\*\s+as\s+[\w$]+))?"  # import X[, {..}] from
    r")\s+from\s+['\"]([^'\"]+)['\"]"
)

_EXPORT_DEFAULT_DECL_RE = re.compile(r"export\s+default\s+" + _DECL_KIND + r"\s+([\w$]+)")
_EXPORT_LIST_RE = re.compile(r"export\s+(?:type\s+)?\{([^}]*)\}")
_EXPORT_DECL_RE = re.compile(
    r"export\s+(?:declare\s+)?(?:async\s+)?"
    r"(?:function\*?|class|const|let|var|interface|type|enum)\s+([\w$]+)"
)
_EXPORT_DEFAULT_IDENT_RE = re.compile(r"export\s+default\s+([A-Za-z_$][\w$]*)\s*;?\s*$", re.MULTILINE)
_DEFAULT_KEYWORDS = frozenset({"function", "class", "async", "const", "let", "var", "new"})

_MARKUP_TAG_RE = re.compile(r"<[A-Z]\w*|</[A-Z]\w*>")
_CAPITALIZED_DECL_RE = re.compile(r"(?:function|const|class)\s+[A-Z]\w*")

_BLOCK_DOC_RE = re.compile(r"/\*\*[\s\S]*?\*/")
_DESCRIPTION_DOC_RE = re.compile(r"/\*\*(?:(?!\*/)[\s\S])*?@description[\s\S]*?\*/")

_HOOK_EXPORT_RE = re.compile(r"export\s+(?:default\s+)?(?:function|const)\s+use[A-Z]\w*")
_EXPORTED_FUNCTION_RE = re.compile(r"export\s+(?:default\s+)?(?:async\s+)?(?:function|const)\s+\w+")
_UTILITY_PATH_RE = re.compile(r"utils?|helpers?|lib")


# ── Extraction ─────────────────────────────────────────────────────


def extract_imports(content: str) -> list[str]:
    """Module specifiers of every ``import ... from '<module>'`` in order.

    Duplicates are kept; nothing downstream depends on uniqueness.
    """
    return [m.group(1) for m in _IMPORT_RE.finditer(content)]


def extract_exports(content: str) -> set[str]:
    """Names declared as exported.

    Union of ``export default <kind> <name>``, ``export {a, b as c}``,
    ``export <kind> <name>`` and ``export default <Identifier>``.
    """
    exports: set[str] = set()

    for m in _EXPORT_DEFAULT_DECL_RE.finditer(content):
        exports.add(m.group(1))

    for m in _EXPORT_LIST_RE.finditer(content):
        for entry in m.group(1).split(","):
            name = _export_list_name(entry)
            if name:
                exports.add(name)

    for m in _EXPORT_DECL_RE.finditer(content):
        exports.add(m.group(1))

    for m in _EXPORT_DEFAULT_IDENT_RE.finditer(content):
        if m.group(1) not in _DEFAULT_KEYWORDS:
            exports.add(m.group(1))

    return exports


def _export_list_name(entry: str) -> str:
    """Exported name of one ``export { ... }`` entry (``a as b`` -> ``b``)."""
    entry = entry.strip()
    if entry.startswith("type "):
        entry = entry[5:].strip()
    if not entry:
        return ""
    tokens = entry.split()
    if len(tokens) == 3 and tokens[1] == "as":
        return tokens[2]
    return tokens[0]


def derive_component_name(path: str) -> str:
    """``folder-sidebar.tsx`` -> ``FolderSidebar``."""
    stem = PurePosixPath(path.replace("\\", "/")).name
    stem = stem.rsplit(".", 1)[0] if "." in stem else stem
    return "".join(part[:1].upper() + part[1:] for part in stem.split("-"))


# ── Predicates ─────────────────────────────────────────────────────


def imports_framework_module(content: str, modules: Iterable[str] = ("react",)) -> bool:
    wanted = set(modules)
    return any(spec in wanted for spec in extract_imports(content))


def has_capitalized_markup_tag(content: str) -> bool:
    return _MARKUP_TAG_RE.search(content) is not None


def has_capitalized_declaration(content: str) -> bool:
    return _CAPITALIZED_DECL_RE.search(content) is not None


def is_component_source(content: str, modules: Iterable[str] = ("react",)) -> bool:
    """Framework import plus either capitalised markup or a capitalised declaration.

    Permissive by intent: a file that merely mentions the framework and
    declares a capitalised constant still counts.
    """
    return imports_framework_module(content, modules) and (
        has_capitalized_markup_tag(content) or has_capitalized_declaration(content)
    )


def has_block_doc(content: str) -> bool:
    return _BLOCK_DOC_RE.search(content) is not None


def has_description_tag(content: str) -> bool:
    """A ``/** ... */`` block that contains an ``@description`` tag."""
    return _DESCRIPTION_DOC_RE.search(content) is not None


def looks_like_hook(content: str, path: str) -> bool:
    filename = PurePosixPath(path.replace("\\", "/")).name
    return filename.startswith("use-") or _HOOK_EXPORT_RE.search(content) is not None


def looks_like_utility(content: str, path: str) -> bool:
    return (
        _UTILITY_PATH_RE.search(path) is not None
        and _EXPORTED_FUNCTION_RE.search(content) is not None
    )


def classify_path_role(path: str) -> str:
    """Role implied by a file's location: page, hook, util or component.

    Checked in that order, so a hook under ``app/`` is still a page.
    """
    posix = PurePosixPath(path.replace("\\", "/"))
    segments = set(posix.parts[:-1])
    if segments & {"app", "pages"}:
        return "page"
    if "hooks" in segments or posix.name.startswith("use-"):
        return "hook"
    if segments & {"lib", "utils"}:
        return "util"
    return "component"
