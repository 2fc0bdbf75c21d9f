"""
Compiled language configurations.

C, C++, C#, Go, Rust, Java, Kotlin, Scala and Swift.
"""

from ..config import LanguageConfig


C_CONFIG = LanguageConfig(
    name="c",
    grammar_source="c",
    extensions=(".c", ".h"),
    display_name="C",
    string_node_types=frozenset({"string_literal", "system_lib_string"}),
    comment_node_types=frozenset({"comment"}),
)

CPP_CONFIG = LanguageConfig(
    name="cpp",
    grammar_source="cpp",
    extensions=(".cpp", ".cc", ".cxx", ".hpp", ".hh", ".hxx"),
    display_name="C++",
    string_node_types=frozenset({"string_literal", "raw_string_literal", "system_lib_string"}),
    comment_node_types=frozenset({"comment"}),
)

CSHARP_CONFIG = LanguageConfig(
    name="csharp",
    grammar_source="csharp",
    extensions=(".cs",),
    display_name="C#",
    string_node_types=frozenset({
        "string_literal",
        "verbatim_string_literal",
        "raw_string_literal",
        "interpolated_string_expression",
    }),
    comment_node_types=frozenset({"comment"}),
)

GO_CONFIG = LanguageConfig(
    name="go",
    grammar_source="go",
    extensions=(".go",),
    display_name="Go",
    string_node_types=frozenset({"interpreted_string_literal", "raw_string_literal"}),
    comment_node_types=frozenset({"comment"}),
)

RUST_CONFIG = LanguageConfig(
    name="rust",
    grammar_source="rust",
    extensions=(".rs",),
    display_name="Rust",
    string_node_types=frozenset({"string_literal", "raw_string_literal"}),
    comment_node_types=frozenset({"line_comment", "block_comment"}),
)

JAVA_CONFIG = LanguageConfig(
    name="java",
    grammar_source="java",
    extensions=(".java",),
    display_name="Java",
    string_node_types=frozenset({"string_literal", "text_block"}),
    comment_node_types=frozenset({"line_comment", "block_comment"}),
)

KOTLIN_CONFIG = LanguageConfig(
    name="kotlin",
    grammar_source="kotlin",
    extensions=(".kt", ".kts"),
    display_name="Kotlin",
    string_node_types=frozenset({"string_literal", "multiline_string_literal"}),
    comment_node_types=frozenset({"line_comment", "multiline_comment"}),
)

SCALA_CONFIG = LanguageConfig(
    name="scala",
    grammar_source="scala",
    extensions=(".scala", ".sc"),
    display_name="Scala",
    string_node_types=frozenset({"string", "interpolated_string"}),
    comment_node_types=frozenset({"comment", "block_comment"}),
)

SWIFT_CONFIG = LanguageConfig(
    name="swift",
    grammar_source="swift",
    extensions=(".swift",),
    display_name="Swift",
    string_node_types=frozenset({
        "line_string_literal",
        "multi_line_string_literal",
        "raw_string_literal",
    }),
    comment_node_types=frozenset({"comment", "multiline_comment"}),
)
