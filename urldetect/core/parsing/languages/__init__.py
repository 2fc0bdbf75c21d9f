"""
Built-in language configurations.

Each module groups related languages:
- web.py: JavaScript, TypeScript, TSX, HTML, CSS
- compiled.py: C, C++, C#, Go, Rust, Java, Kotlin, Scala, Swift
- scripting.py: Python, Ruby, PHP, Bash, JSON, YAML, TOML

Anything else (Markdown, plain text, ...) is scanned with the regex
fallback.
"""

from .web import (
    JAVASCRIPT_CONFIG,
    TYPESCRIPT_CONFIG,
    TSX_CONFIG,
    HTML_CONFIG,
    CSS_CONFIG,
)
from .compiled import (
    C_CONFIG,
    CPP_CONFIG,
    CSHARP_CONFIG,
    GO_CONFIG,
    RUST_CONFIG,
    JAVA_CONFIG,
    KOTLIN_CONFIG,
    SCALA_CONFIG,
    SWIFT_CONFIG,
)
from .scripting import (
    PYTHON_CONFIG,
    RUBY_CONFIG,
    PHP_CONFIG,
    BASH_CONFIG,
    JSON_CONFIG,
    YAML_CONFIG,
    TOML_CONFIG,
)

DEFAULT_LANGUAGES = (
    JAVASCRIPT_CONFIG,
    TYPESCRIPT_CONFIG,
    TSX_CONFIG,
    HTML_CONFIG,
    CSS_CONFIG,
    C_CONFIG,
    CPP_CONFIG,
    CSHARP_CONFIG,
    GO_CONFIG,
    RUST_CONFIG,
    JAVA_CONFIG,
    KOTLIN_CONFIG,
    SCALA_CONFIG,
    SWIFT_CONFIG,
    PYTHON_CONFIG,
    RUBY_CONFIG,
    PHP_CONFIG,
    BASH_CONFIG,
    JSON_CONFIG,
    YAML_CONFIG,
    TOML_CONFIG,
)

__all__ = [
    'DEFAULT_LANGUAGES',
    'JAVASCRIPT_CONFIG',
    'TYPESCRIPT_CONFIG',
    'TSX_CONFIG',
    'HTML_CONFIG',
    'CSS_CONFIG',
    'C_CONFIG',
    'CPP_CONFIG',
    'CSHARP_CONFIG',
    'GO_CONFIG',
    'RUST_CONFIG',
    'JAVA_CONFIG',
    'KOTLIN_CONFIG',
    'SCALA_CONFIG',
    'SWIFT_CONFIG',
    'PYTHON_CONFIG',
    'RUBY_CONFIG',
    'PHP_CONFIG',
    'BASH_CONFIG',
    'JSON_CONFIG',
    'YAML_CONFIG',
    'TOML_CONFIG',
]
