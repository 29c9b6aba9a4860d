import json

from schemer.builtins import is_primitive_name
from schemer.types.function import Closure, Primitive

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_CLOSURE = "\033[92m"
COLOR_PRIMITIVE = "\033[95m"
COLOR_SPECIAL_FORM = "\033[90m"
COLOR_NUMBER = "\033[93m"
COLOR_BOOLEAN = "\033[96m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "max_depth": 8,
    "display_legend": False,
    "color_symbols": True,
    "color_closures": True,
    "color_primitives": True,
    "color_special_forms": True,
    "color_numbers": False,
    "color_booleans": False,
}

# No colours and no depth limit: used for error messages and Closure.__str__
PLAIN_OPTIONS = {
    **{k: False for k in DEFAULT_OPTIONS if k.startswith("color_")},
    "max_line_length": 10**9,
    "max_depth": 10**9,
    "display_legend": False,
}

SPECIAL_FORMS = {"quote", "lambda", "cond", "else"}


# ----------------- Colorize utility -----------------
def colorize(obj, options: dict = DEFAULT_OPTIONS) -> str:
    if obj is True or obj is False:
        text = "#t" if obj else "#f"
        if options.get("color_booleans", False):
            return f"{COLOR_BOOLEAN}{text}{RESET}"
        return text
    if isinstance(obj, Primitive) or is_primitive_name(obj):
        name = str(obj)
        if options.get("color_primitives", True):
            return f"{COLOR_PRIMITIVE}{name}{RESET}"
        return name
    if isinstance(obj, Closure):
        text = str(obj)
        if options.get("color_closures", True):
            return f"{COLOR_CLOSURE}{text}{RESET}"
        return text
    if isinstance(obj, str):
        if obj in SPECIAL_FORMS and options.get("color_special_forms", True):
            return f"{COLOR_SPECIAL_FORM}{obj}{RESET}"
        if options.get("color_symbols", True):
            return f"{COLOR_SYMBOL}{obj}{RESET}"
        return obj
    if isinstance(obj, (int, float)) and options.get("color_numbers", False):
        return f"{COLOR_NUMBER}{obj}{RESET}"
    return str(obj)


# ----------------- Pretty printer -----------------
def pprint_expr(
    expr,
    indent: int = 0,
    options: dict = DEFAULT_OPTIONS,
    _current_depth: int = 0,
) -> str:
    pad = "  " * indent
    legend_str = ""
    if options.get("display_legend", False) and indent == 0:
        legend_items = [
            f"{COLOR_SYMBOL}Symbol{RESET}",
            f"{COLOR_PRIMITIVE}Primitive{RESET}",
            f"{COLOR_CLOSURE}Closure{RESET}",
            f"{COLOR_SPECIAL_FORM}Special Form{RESET}",
        ]
        legend_str = "Color Key: " + " | ".join(legend_items) + "\n"

    if _current_depth >= options.get("max_depth", 8):
        return legend_str + "…"

    if not isinstance(expr, list):
        return legend_str + colorize(expr, options)

    if not expr:
        return legend_str + "()"

    parts = [
        pprint_expr(e, indent + 1, options, _current_depth + 1)
        for e in expr
    ]

    single_line = "(" + " ".join(parts) + ")"
    if len(single_line) + indent * 2 <= options.get("max_line_length", 80):
        return legend_str + single_line

    aligned_lines = ["(" + parts[0]]
    for part in parts[1:]:
        aligned_lines.append(pad + "  " + part)
    aligned_lines[-1] += ")"
    return legend_str + "\n".join(aligned_lines)


def print_expr(expr, options: dict = DEFAULT_OPTIONS) -> None:
    print(pprint_expr(expr, options=options))


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> dict:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError:
        return dict(DEFAULT_OPTIONS)
    if not isinstance(user_opts, dict):
        return dict(DEFAULT_OPTIONS)
    return {**DEFAULT_OPTIONS, **user_opts}
