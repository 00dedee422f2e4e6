import re

# Scalar literals
NUMBER_PATTERN = re.compile(r'^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$')
INTEGER_PATTERN = re.compile(r'^[-+]?\d+$')
BARE_KEY_PATTERN = re.compile(r'^[A-Za-z0-9_-]+$')

# TOML
TOML_TABLE_ARRAY_PATTERN = re.compile(r'^\[\[.*\]\]$')
TOML_SECTION_PATTERN = re.compile(r'^\[([^\]]+)\]$')

# YAML
YAML_COMMENT_PATTERN = re.compile(r'^\s*#\s*(.*)$')
YAML_LIST_ITEM_PATTERN = re.compile(r'^(\s*)-(?:\s+(.*))?$')
YAML_INLINE_COMMENT_PATTERN = re.compile(r'^(.+?)\s+#\s*(.*)$')
YAML_DOCUMENT_MARKER_PATTERN = re.compile(r'^(?:---|\.\.\.)\s*$')
INDENT_PATTERN = re.compile(r'^(\s*)')

# JSON cleanup
JSON_LINE_COMMENT_PATTERN = re.compile(r'^\s*//.*$', re.MULTILINE)
JSON_CLOSING_BRACKET_PATTERN = re.compile(r'\s*[}\]]')
