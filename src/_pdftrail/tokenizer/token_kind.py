from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    NUMERIC = auto()
    OPERATOR = auto()
    COMMENT = auto()
    NAME = auto()
    STRING = auto()
    HEX_STRING = auto()
    ARRAY_START = auto()
    ARRAY_END = auto()
    DICTIONARY_START = auto()
    DICTIONARY_END = auto()

    @classmethod
    def delimiters(cls):
        return {
            cls.DICTIONARY_START: b"<<",
            cls.DICTIONARY_END: b">>",
            cls.ARRAY_START: b"[",
            cls.ARRAY_END: b"]",
        }
