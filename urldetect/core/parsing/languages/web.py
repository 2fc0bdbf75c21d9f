"""
Web language configurations.

JavaScript, TypeScript (.ts and .tsx grammars), HTML and CSS.

URL-bearing nodes:
- JS/TS: string and template literals, line and block comments
- HTML: attribute values and text (script/style bodies are raw_text)
- CSS: string values and function calls (covers unquoted url(...))
"""

from ..config import LanguageConfig


_JS_STRINGS = frozenset({"string", "template_string"})

JAVASCRIPT_CONFIG = LanguageConfig(
    name="javascript",
    grammar_source="javascript",
    extensions=(".js", ".jsx", ".mjs", ".cjs"),
    display_name="JavaScript",
    string_node_types=_JS_STRINGS,
    comment_node_types=frozenset({"comment"}),
)

TYPESCRIPT_CONFIG = LanguageConfig(
    name="typescript",
    grammar_source="typescript",
    extensions=(".ts", ".mts", ".cts"),
    display_name="TypeScript",
    string_node_types=_JS_STRINGS,
    comment_node_types=frozenset({"comment"}),
)

TSX_CONFIG = LanguageConfig(
    name="tsx",
    grammar_source="tsx",
    extensions=(".tsx",),
    display_name="TSX",
    string_node_types=_JS_STRINGS,
    comment_node_types=frozenset({"comment"}),
)

HTML_CONFIG = LanguageConfig(
    name="html",
    grammar_source="html",
    extensions=(".html", ".htm", ".xhtml"),
    display_name="HTML",
    string_node_types=frozenset({
        "quoted_attribute_value",
        "attribute_value",
        "text",
        "raw_text",
    }),
    comment_node_types=frozenset({"comment"}),
)

CSS_CONFIG = LanguageConfig(
    name="css",
    grammar_source="css",
    extensions=(".css",),
    display_name="CSS",
    string_node_types=frozenset({"string_value", "call_expression"}),
    comment_node_types=frozenset({"comment"}),
)
