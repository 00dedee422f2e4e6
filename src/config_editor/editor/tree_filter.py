from ..format_parser.core.config_value import ConfigValue, ValueType

def filter_tree(tree: ConfigValue, query: str) -> ConfigValue:
    """Keep map entries whose key, or any descendant key, contains query.

    Matching is a case-insensitive substring test. A matching key keeps its
    whole subtree; array items are never matched on their own.
    """
    if not query or tree.type != ValueType.MAP:
        return tree
    return _filter_map(tree, query.lower())

def _filter_map(node: ConfigValue, query: str) -> ConfigValue:
    result = {}
    for key, value in node.entries.items():
        if query in key.lower():
            result[key] = value
        elif value.type == ValueType.MAP:
            filtered = _filter_map(value, query)
            if filtered.entries:
                result[key] = filtered
    return ConfigValue.mapping(result)
