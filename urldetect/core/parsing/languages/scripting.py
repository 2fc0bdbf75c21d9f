"""
Scripting and data language configurations.

Python, Ruby, PHP, Bash, plus JSON, YAML and TOML.

Bash URLs are frequently unquoted (curl https://...), so bare words
count as string candidates. YAML plain scalars likewise.
"""

from ..config import LanguageConfig


PYTHON_CONFIG = LanguageConfig(
    name="python",
    grammar_source="python",
    extensions=(".py", ".pyw", ".pyi"),
    display_name="Python",
    string_node_types=frozenset({"string"}),
    comment_node_types=frozenset({"comment"}),
)

RUBY_CONFIG = LanguageConfig(
    name="ruby",
    grammar_source="ruby",
    extensions=(".rb", ".rake", ".gemspec"),
    filenames=("Rakefile", "Gemfile"),
    display_name="Ruby",
    string_node_types=frozenset({"string", "heredoc_body"}),
    comment_node_types=frozenset({"comment"}),
)

PHP_CONFIG = LanguageConfig(
    name="php",
    grammar_source="php",
    extensions=(".php",),
    display_name="PHP",
    string_node_types=frozenset({"string", "encapsed_string", "heredoc", "nowdoc"}),
    comment_node_types=frozenset({"comment"}),
)

BASH_CONFIG = LanguageConfig(
    name="bash",
    grammar_source="bash",
    extensions=(".sh", ".bash", ".zsh"),
    display_name="Bash",
    string_node_types=frozenset({"string", "raw_string", "word", "heredoc_body"}),
    comment_node_types=frozenset({"comment"}),
)

JSON_CONFIG = LanguageConfig(
    name="json",
    grammar_source="json",
    extensions=(".json",),
    display_name="JSON",
    string_node_types=frozenset({"string"}),
    comment_node_types=frozenset({"comment"}),
)

YAML_CONFIG = LanguageConfig(
    name="yaml",
    grammar_source="yaml",
    extensions=(".yaml", ".yml"),
    display_name="YAML",
    string_node_types=frozenset({
        "double_quote_scalar",
        "single_quote_scalar",
        "plain_scalar",
        "block_scalar",
    }),
    comment_node_types=frozenset({"comment"}),
)

TOML_CONFIG = LanguageConfig(
    name="toml",
    grammar_source="toml",
    extensions=(".toml",),
    display_name="TOML",
    string_node_types=frozenset({"string"}),
    comment_node_types=frozenset({"comment"}),
)
