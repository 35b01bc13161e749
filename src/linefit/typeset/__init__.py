from .tokens import Kind, Token, tokenize
from .wrap import BLANK, Blank, Line, wrap

__all__ = ["BLANK", "Blank", "Kind", "Line", "Token", "tokenize", "wrap"]
