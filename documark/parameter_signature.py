"""Logic for rendering a single parameter of a signature."""

from documark.human_name import human_name
from documark.parameter_info import ParameterInfo


def default_literal(value: object) -> str:
    """Render a parameter default the way it reads in source."""
    if value is None:
        return "null"
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def parameter_signature(param: ParameterInfo, *, compact: bool = False) -> str:
    """Render 'ref int count = 5' (full) or 'ref int' (compact)."""
    pre = ""
    pos = ""

    if param.is_by_ref:
        pre += f"{param.direction or 'ref'} "

    if param.is_params:
        pre += "params "

    if param.is_optional:
        pos += f" = {default_literal(param.default_value)}"

    type_name = human_name(param.parameter_type)
    if type_name.endswith("&"):
        type_name = type_name[:-1]

    if compact:
        return f"{pre}{type_name}"
    return f"{pre}{type_name} {param.name}{pos}"
