class ParsingError(Exception):
    """Base error for parsing failures"""
    pass

class ValueParsingError(ParsingError):
    """Error when decoding a scalar or inline value"""
    pass

class ConfigSyntaxError(ParsingError):
    """Error for malformed document structure"""
    pass

class JsonSyntaxError(ConfigSyntaxError):
    pass

class TomlSyntaxError(ConfigSyntaxError):
    """Error for TOML constructs the line parser cannot represent"""
    pass

class YamlSyntaxError(ConfigSyntaxError):
    """Error for YAML constructs the indentation parser cannot represent"""
    pass

class UnsupportedFormatError(ParsingError):
    """Error for formats without a structural parser"""
    pass

class SerializationError(Exception):
    """Error when a tree cannot be written in the requested format"""
    pass
