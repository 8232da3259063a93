"""nestyle model layer -- public type re-exports."""

from nestyle.model.content import (
    Apply,
    Content,
    Contents,
    Deref,
    Leaf,
    Mix,
    Raw,
    Url,
    UrlParam,
    Var,
    show_contents,
    show_deref,
)
from nestyle.model.declaration import (
    Attrib,
    Block,
    ContentPair,
    Declaration,
    FlatDec,
    MixinDec,
    MixinPair,
    SimplePair,
)
from nestyle.model.diagnostic import Diagnostic, Severity
from nestyle.model.lines import IndentedLine, Line, MixinLine, Nest, PairLine, SingleLine

__all__ = [
    # content
    "Leaf",
    "Apply",
    "Deref",
    "Raw",
    "Var",
    "Url",
    "UrlParam",
    "Mix",
    "Content",
    "Contents",
    "show_deref",
    "show_contents",
    # lines
    "PairLine",
    "SingleLine",
    "MixinLine",
    "Line",
    "IndentedLine",
    "Nest",
    # declarations
    "Attrib",
    "Block",
    "MixinDec",
    "Declaration",
    "SimplePair",
    "MixinPair",
    "ContentPair",
    "FlatDec",
    # diagnostic
    "Severity",
    "Diagnostic",
]
