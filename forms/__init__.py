from forms.values import (
    Bareword,
    FlagWord,
    Literal,
    Other,
    Sequence,
    Text,
    Value,
    VariableRef,
    as_value,
    render,
)
from forms.statements import (
    Comment,
    ConstDef,
    Curve,
    Data,
    Form,
    FunctionDef,
    Plot,
    Raw,
    Reset,
    Set,
    Table,
    Unset,
    render_form,
)
from forms.parser import decode_value, parse_form, parse_forms
from forms.assembler import AssembledScript, assemble

__all__ = [
    "Bareword", "FlagWord", "Literal", "Other", "Sequence", "Text", "Value", "VariableRef",
    "as_value", "render",
    "Comment", "ConstDef", "Curve", "Data", "Form", "FunctionDef", "Plot", "Raw", "Reset",
    "Set", "Table", "Unset", "render_form",
    "decode_value", "parse_form", "parse_forms",
    "AssembledScript", "assemble",
]
