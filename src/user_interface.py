from typing import List

from .models import PlanParameters

# (field, prompt) in the order they are asked
PARAMETER_PROMPTS = [
    ('columns', "Columns"),
    ('column_spacing', "Column spacing (mm)"),
    ('rows', "Rows"),
    ('row_spacing', "Row spacing (mm)"),
    ('feed', "Feed (mm/min)"),
    ('fast_feed', "Fast feed (mm/min)"),
    ('tool_diameter', "Tool diameter (mm)"),
    ('hole_depth', "Hole depth (mm)"),
    ('hole_diameter', "Hole diameter (mm)"),
    ('plate_depth', "Plate depth (mm)"),
    ('plate_diameter', "Plate diameter (mm)"),
    ('safe_z', "Safe Z (mm)"),
]


def get_float_input(prompt: str, default: float = None) -> float:
    while True:
        try:
            if default is not None:
                user_input = input(f"{prompt} (default: {default}): ").strip()
                if not user_input:
                    return default
            else:
                user_input = input(f"{prompt}: ").strip()

            return float(user_input)
        except ValueError:
            print("Please enter a valid number")


def get_int_input(prompt: str, default: int = None) -> int:
    while True:
        try:
            if default is not None:
                user_input = input(f"{prompt} (default: {default}): ").strip()
                if not user_input:
                    return default
            else:
                user_input = input(f"{prompt}: ").strip()

            return int(user_input)
        except ValueError:
            print("Please enter a valid number")


def get_plan_parameters(defaults: PlanParameters = None) -> PlanParameters:
    """Prompt user for plan parameters, offering defaults."""
    defaults = defaults or PlanParameters()
    values = {}

    print("\n=== Grid & Hole Parameters ===")
    print("Press Enter to keep the default value.")

    for name, prompt in PARAMETER_PROMPTS:
        default = getattr(defaults, name)
        if name in ('columns', 'rows'):
            values[name] = get_int_input(prompt, default)
        else:
            values[name] = get_float_input(prompt, default)

    return PlanParameters(**values)


def display_summary(params: PlanParameters, output_file: str, warnings: List[str]) -> bool:
    """Display a summary of the plan and ask for confirmation."""
    print(f"\n=== Plan Summary ===")
    print(f"Output file: {output_file}")
    print(f"Grid: {params.columns} x {params.rows} holes "
          f"({params.column_spacing} mm x {params.row_spacing} mm spacing)")
    print(f"Tool diameter: {params.tool_diameter} mm")
    print(f"Hole: ⌀{params.hole_diameter} mm, {params.hole_depth} mm deep")
    print(f"Plate relief: ⌀{params.plate_diameter} mm, {params.plate_depth} mm deep")
    print(f"Feed: {params.feed} mm/min, fast feed: {params.fast_feed} mm/min")
    print(f"Safe Z: {params.safe_z} mm")

    for warning in warnings:
        print(f"⚠️  {warning}")

    confirm = input("\nProceed with G-code generation? (y/n): ").lower().strip()
    return confirm in ['y', 'yes']
