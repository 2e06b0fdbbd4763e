"""Shared utility modules for G-code generation."""

from .gcode_format import (
    format_number,
    generate_header,
    generate_rapid_move,
    generate_linear_move,
    generate_arc_move
)
from .arc_utils import calculate_arc_pair, emit_arc_pair
from .helix import iter_half_turns, helix_plunge
from .relief import calculate_relief_diameters, grow_relief
from .brim import brim_cleanup
from .validators import (
    validate_values,
    validate_geometry,
    validate_feed_rates,
    validate_spacing,
    validate_plan,
    validate_hole_count
)
from .file_manager import (
    create_output_directory,
    write_program_file
)

__all__ = [
    # gcode_format
    'format_number',
    'generate_header',
    'generate_rapid_move',
    'generate_linear_move',
    'generate_arc_move',
    # arc_utils
    'calculate_arc_pair',
    'emit_arc_pair',
    # helix
    'iter_half_turns',
    'helix_plunge',
    # relief
    'calculate_relief_diameters',
    'grow_relief',
    # brim
    'brim_cleanup',
    # validators
    'validate_values',
    'validate_geometry',
    'validate_feed_rates',
    'validate_spacing',
    'validate_plan',
    'validate_hole_count',
    # file_manager
    'create_output_directory',
    'write_program_file',
]
