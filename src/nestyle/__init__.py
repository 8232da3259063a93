"""nestyle - a compiler for indentation-nested stylesheet templates."""

__version__ = "0.1.0"

from nestyle.codegen import Mixin, Renderer, render  # noqa: E402
from nestyle.compiler import (  # noqa: E402
    MixinTemplate,
    Template,
    check_mixin,
    check_template,
    compile_mixin,
    compile_template,
)
from nestyle.config import CompilerOptions  # noqa: E402
from nestyle.errors import (  # noqa: E402
    BindError,
    CompileError,
    InternalError,
    ParseError,
    TemplateError,
)
from nestyle.stdlib import BLACK, RED, Color, NamedColor, ToStyle, to_style  # noqa: E402

__all__ = [
    "__version__",
    "compile_template",
    "compile_mixin",
    "check_template",
    "check_mixin",
    "Template",
    "MixinTemplate",
    "Renderer",
    "Mixin",
    "render",
    "CompilerOptions",
    "TemplateError",
    "ParseError",
    "CompileError",
    "BindError",
    "InternalError",
    "Color",
    "NamedColor",
    "ToStyle",
    "to_style",
    "RED",
    "BLACK",
]
